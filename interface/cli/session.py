"""Generation helpers for the Text-to-SQL CLI."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from application.controllers import GenerationController
from domain.entities import GenerationOutcome

from .session_state import FormState


def generate_with_progress(
    console,
    controller: GenerationController,
    form: FormState,
    question: str,
) -> GenerationOutcome:
    """Submit ``question`` and show a spinner while the request is in flight."""
    form.last_question = question

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("⚡ Generating SQL...", total=None)
        outcome = controller.submit(form.api_key, form.schema, question)
        progress.update(task, description="✅ Done")
        return outcome
