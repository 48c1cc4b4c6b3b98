from unittest.mock import MagicMock

from domain.entities import GenerationOutcome, GenerationResult
from domain.prompting import DEFAULT_SCHEMA
from interface.cli.session import generate_with_progress
from interface.cli.session_state import create_form_state


class DummyProgress:
    def __init__(self, *args, **kwargs):
        self.records = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def add_task(self, description, total=None):
        self.records.append(description)
        return 1

    def update(self, task, description):
        self.records.append(description)


def test_generate_with_progress_submits_form_values(monkeypatch):
    controller = MagicMock()
    outcome = GenerationOutcome.success(GenerationResult(sql="SELECT 1", explanation="one"))
    controller.submit.return_value = outcome

    progress = DummyProgress()
    monkeypatch.setattr("interface.cli.session.Progress", lambda *args, **kwargs: progress)

    form = create_form_state(api_key="key")
    result = generate_with_progress(MagicMock(), controller, form, "How many?")

    assert result is outcome
    controller.submit.assert_called_once_with("key", DEFAULT_SCHEMA, "How many?")
    assert form.last_question == "How many?"
    assert progress.records == ["⚡ Generating SQL...", "✅ Done"]


def test_form_state_defaults_and_reset():
    form = create_form_state()
    assert form.schema == DEFAULT_SCHEMA
    assert form.has_api_key is False

    form.schema = "CREATE TABLE t (id INT);"
    form.reset_schema()
    assert form.schema == DEFAULT_SCHEMA


def test_form_state_repr_hides_api_key():
    form = create_form_state(api_key="super-secret")
    assert "super-secret" not in repr(form)


def test_empty_schema_is_kept():
    assert create_form_state(schema="").schema == ""
