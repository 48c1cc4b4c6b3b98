import io
from unittest.mock import Mock

from click.testing import CliRunner
from rich.console import Console

from application.controllers import GenerationController
from application.use_cases import SQLGenerationUseCase
from domain.entities import GenerationOutcome, GenerationResult
from domain.errors import DecodeError, RemoteError
from domain.prompting import EXAMPLE_QUESTIONS
from interface.cli import main as cli_main_module
from interface.cli.interface import TextToSQLCLI
from interface.cli.session_state import create_form_state

RESULT = GenerationResult(
    sql="SELECT COUNT(*) FROM employees", explanation="Counts all employees."
)


def _controller(outcome):
    use_case = Mock(spec=SQLGenerationUseCase)
    use_case.generate.return_value = outcome
    return GenerationController(use_case=use_case), use_case


def _run_session(monkeypatch, controller, inputs, api_key="key"):
    answers = iter(inputs)
    monkeypatch.setattr(
        "interface.cli.interface.prompt", lambda *args, **kwargs: next(answers)
    )
    output = io.StringIO()
    console = Console(file=output, width=120)
    cli = TextToSQLCLI(controller, form=create_form_state(api_key=api_key), console=console)
    cli.start_interactive_session()
    return output.getvalue()


def test_cli_typical_session(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))

    output = _run_session(monkeypatch, controller, ["How many employees?", "copy", "exit"])

    use_case.generate.assert_called_once()
    assert use_case.generate.call_args[0][2] == "How many employees?"
    assert output.count("SELECT COUNT(*) FROM employees") >= 2
    assert "Counts all employees." in output
    assert "Thanks for using the Text-to-SQL Assistant" in output


def test_cli_prompts_for_missing_api_key(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))

    _run_session(monkeypatch, controller, ["typed-key", "Question?", "quit"], api_key="")

    assert use_case.generate.call_args[0][0] == "typed-key"


def test_cli_example_shortcut(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))

    _run_session(monkeypatch, controller, ["2", "exit"])

    assert use_case.generate.call_args[0][2] == EXAMPLE_QUESTIONS[1]


def test_cli_shows_error_in_place_of_result(monkeypatch):
    controller, _ = _controller(GenerationOutcome.failure(RemoteError("quota exceeded")))

    output = _run_session(monkeypatch, controller, ["Question?", "exit"])

    assert "quota exceeded" in output
    assert "Generated SQL Query" not in output


def test_cli_copy_before_any_result(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))

    output = _run_session(monkeypatch, controller, ["copy", "exit"])

    assert "Nothing to copy yet" in output
    use_case.generate.assert_not_called()


def test_cli_schema_commands(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))
    monkeypatch.setattr(
        TextToSQLCLI, "read_schema", lambda self: "CREATE TABLE pets (id INT);"
    )

    _run_session(monkeypatch, controller, ["schema edit", "Question?", "exit"])

    assert use_case.generate.call_args[0][1] == "CREATE TABLE pets (id INT);"


def _patch_one_shot(monkeypatch, outcome):
    controller, use_case = _controller(outcome)
    monkeypatch.setattr(cli_main_module, "create_generation_controller", lambda config: controller)
    monkeypatch.setattr(cli_main_module, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(cli_main_module, "setup_otel_tracing", lambda: None)
    return use_case


def test_one_shot_question_prints_sql(monkeypatch, tmp_path):
    use_case = _patch_one_shot(monkeypatch, GenerationOutcome.success(RESULT))
    schema_file = tmp_path / "schema.sql"
    schema_file.write_text("CREATE TABLE t (id INT);", encoding="utf-8")

    result = CliRunner().invoke(
        cli_main_module.main,
        ["--api-key", "key", "--schema-file", str(schema_file), "-q", "How many?"],
    )

    assert result.exit_code == 0
    assert "SELECT COUNT(*) FROM employees" in result.output
    use_case.generate.assert_called_once_with("key", "CREATE TABLE t (id INT);", "How many?")


def test_one_shot_failure_exits_non_zero(monkeypatch):
    _patch_one_shot(monkeypatch, GenerationOutcome.failure(RemoteError("quota exceeded")))

    result = CliRunner().invoke(
        cli_main_module.main,
        ["--question", "How many?"],
        env={"GEMINI_API_KEY": "key"},
    )

    assert result.exit_code == 1
    assert "quota exceeded" in result.output


def test_cli_survives_markup_like_model_output(monkeypatch):
    error = DecodeError("Model response was not valid JSON", raw_text="[/INST] SELECT 1")
    controller, use_case = _controller(GenerationOutcome.failure(error))

    output = _run_session(monkeypatch, controller, ["Question?", "Question again?", "exit"])

    assert use_case.generate.call_count == 2
    assert output.count("[/INST] SELECT 1") == 2
    assert "Thanks for using the Text-to-SQL Assistant" in output


def test_cli_shows_explanation_verbatim(monkeypatch):
    result = GenerationResult(sql="SELECT status FROM t", explanation="[red]status[/red] column")
    controller, _ = _controller(GenerationOutcome.success(result))

    output = _run_session(monkeypatch, controller, ["Question?", "exit"])

    assert "[red]status[/red] column" in output


def test_cli_error_handler_prints_markup_like_text(monkeypatch):
    controller, use_case = _controller(GenerationOutcome.success(RESULT))
    use_case.generate.side_effect = [RuntimeError("bad [/INST] tag"), GenerationOutcome.success(RESULT)]

    output = _run_session(monkeypatch, controller, ["Question?", "Again?", "exit"])

    assert "I encountered an issue: bad [/INST] tag" in output
    assert "Counts all employees." in output
