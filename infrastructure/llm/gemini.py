"""Google Gemini implementation of :class:`LLMClient` over the REST API."""

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from domain.errors import DecodeError, RemoteError, TransportError
from domain.services import LLMClient
from infrastructure.config import GeminiConfig
from infrastructure.logging import get_logger
from tracing import trace_llm_operation, tracer

logger = get_logger(__name__)


@dataclass
class LLMResponse:
    """Response from the Gemini generateContent endpoint."""

    content: str
    response_time: float = 0.0
    model_used: str = ""
    status_code: int = 200


class GeminiClient(LLMClient):
    """Client for the Gemini ``models/{model}:generateContent`` endpoint.

    The API key is passed per call and only ever placed on the outgoing
    request; it is not stored on the client.
    """

    def __init__(
        self,
        config: Optional[GeminiConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or GeminiConfig()
        self.session = session or requests.Session()
        logger.info(f"Gemini client initialized (model={self.config.model})")

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/models/{self.config.model}:generateContent"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        """Build the JSON request body for ``prompt``."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.config.temperature,
                "maxOutputTokens": self.config.max_output_tokens,
            },
        }

    def generate_content(self, api_key: str, prompt: str) -> str:
        return self.generate(api_key, prompt).content

    def generate(self, api_key: str, prompt: str) -> LLMResponse:
        """POST ``prompt`` to Gemini and return the first candidate's text."""
        start_time = time.time()
        params: Dict[str, str] = {}
        headers = {"Content-Type": "application/json"}
        if self.config.credential_location == "header":
            headers["x-goog-api-key"] = api_key
        else:
            params["key"] = api_key

        with trace_llm_operation(
            name="gemini_generate_content",
            model=self.config.model,
            temperature=self.config.temperature,
            max_tokens=self.config.max_output_tokens,
            prompt_length=len(prompt),
        ):
            try:
                response = self.session.post(
                    self.endpoint,
                    params=params,
                    headers=headers,
                    json=self.build_payload(prompt),
                    timeout=self.config.request_timeout,
                )
            except requests.exceptions.RequestException as e:
                # str(e) may contain the request URL, and with it the key
                logger.error(f"Gemini request failed: {type(e).__name__}")
                raise TransportError(type(e).__name__) from e

            response_time = time.time() - start_time

            if not response.ok:
                message = _extract_error_message(response)
                logger.warning(
                    f"Gemini returned HTTP {response.status_code}: {message or 'no message'}"
                )
                raise RemoteError(message, status_code=response.status_code)

            content = _extract_candidate_text(response)

            tracer.log_metrics(
                {
                    "response_time": response_time,
                    "prompt_length": len(prompt),
                    "content_length": len(content),
                    "status_code": response.status_code,
                }
            )

            return LLMResponse(
                content=content,
                response_time=response_time,
                model_used=self.config.model,
                status_code=response.status_code,
            )


def _extract_error_message(response: requests.Response) -> Optional[str]:
    """Return ``error.message`` from an error body, if there is one."""
    try:
        body = response.json()
    except (ValueError, RecursionError):
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"] or None
    return None


def _extract_candidate_text(response: requests.Response) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a success body."""
    try:
        body = response.json()
    except (ValueError, RecursionError) as e:
        raise DecodeError(
            "Gemini returned a non-JSON response",
            raw_text=response.text,
            reason="invalid_envelope",
        ) from e

    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        finish_reason = None
        candidates = body.get("candidates") if isinstance(body, dict) else None
        if isinstance(candidates, list) and candidates:
            first = candidates[0]
            if isinstance(first, dict):
                finish_reason = first.get("finishReason")
        detail = f" (finish reason: {finish_reason})" if finish_reason else ""
        raise DecodeError(
            f"Gemini response contained no candidate text{detail}",
            raw_text=response.text,
            reason="invalid_envelope",
        ) from e

    if not isinstance(text, str):
        raise DecodeError(
            "Gemini candidate text was not a string",
            raw_text=response.text,
            reason="invalid_envelope",
        )
    return text
