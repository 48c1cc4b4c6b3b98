import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from domain.entities import (
    GenerationOutcome,
    GenerationRequest,
    GenerationResult,
    GenerationState,
    GenerationStatus,
)
from domain.errors import RemoteError


def test_generation_state_defaults():
    state = GenerationState()
    assert state.status is GenerationStatus.IDLE
    assert state.result is None
    assert state.error is None
    assert state.active_token == 0
    assert state.busy is False


def test_generation_state_busy_while_loading():
    assert GenerationState(status=GenerationStatus.LOADING).busy is True


def test_outcome_success_and_failure():
    result = GenerationResult(sql="SELECT 1", explanation="one")
    ok = GenerationOutcome.success(result)
    assert ok.ok is True
    assert ok.result == result

    failed = GenerationOutcome.failure(RemoteError("boom"))
    assert failed.ok is False
    assert failed.error.user_message == "boom"


def test_outcome_requires_exactly_one_side():
    with pytest.raises(ValueError):
        GenerationOutcome()
    with pytest.raises(ValueError):
        GenerationOutcome(
            result=GenerationResult(sql="", explanation=""), error=RemoteError("x")
        )


def test_request_repr_hides_api_key():
    request = GenerationRequest(api_key="secret-key", schema="CREATE TABLE t (id INT);", question="q")
    assert "secret-key" not in repr(request)


def test_result_to_dict():
    assert GenerationResult(sql="SELECT 1", explanation="e").to_dict() == {
        "sql": "SELECT 1",
        "explanation": "e",
    }
