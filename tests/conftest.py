import json
import os
import sys
from unittest.mock import Mock

import pytest
import requests

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from infrastructure.config import GeminiConfig
from infrastructure.llm.gemini import GeminiClient


def _make_response(status_code, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response


def _candidate_body(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def http_response():
    """Factory building real ``requests.Response`` objects."""
    return _make_response


@pytest.fixture
def candidate_body():
    """Factory building a generateContent success body around ``text``."""
    return _candidate_body


@pytest.fixture
def gemini_session():
    """A ``requests.Session`` stand-in; ``post.call_count`` counts transport calls."""
    return Mock(spec=requests.Session)


@pytest.fixture
def gemini_client(gemini_session):
    return GeminiClient(config=GeminiConfig(), session=gemini_session)
