"""Console output and formatting helpers for the Text-to-SQL CLI."""

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from domain.entities import GenerationState, GenerationStatus
from domain.prompting import EXAMPLE_QUESTIONS


def display_state(console, state: GenerationState) -> None:
    """Render the latest result, or the error that replaced it."""
    if state.status is GenerationStatus.FAILED:
        show_error(console, state.error or "Failed to generate SQL query")
        return

    if state.status is not GenerationStatus.SUCCESS or state.result is None:
        return

    console.print()
    console.print(
        Panel(
            Syntax(state.result.sql, "sql", theme="monokai", word_wrap=True),
            title="✓ Generated SQL Query",
            border_style="green",
        )
    )
    if state.result.explanation:
        console.print(
            Panel(Text(state.result.explanation), title="Explanation", border_style="blue")
        )
    console.print("Type 'copy' to print the bare SQL for copying.")
    console.print()


def show_error(console, message: str) -> None:
    """Show an error in place of a result."""
    console.print()
    console.print(Panel(Text(message), title="Error", border_style="red"))
    console.print()


def show_examples(console) -> None:
    """List the example questions with their shortcut numbers."""
    table = Table(title="Try an example", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Question")
    for index, example in enumerate(EXAMPLE_QUESTIONS, start=1):
        table.add_row(str(index), example)
    console.print(table)


def show_schema(console, schema: str) -> None:
    """Show the schema that will be sent with each question."""
    if not schema.strip():
        console.print("No schema set. Use 'schema edit' to enter one.")
        return
    console.print(
        Panel(Syntax(schema, "sql", theme="monokai"), title="Database Schema")
    )


def show_help(console) -> None:
    """Show help information."""
    console.print()
    console.print("🚀 How to use")
    console.print("1. Get your free API key from Google AI Studio (https://aistudio.google.com/app/apikey)")
    console.print("2. Enter your database schema (or keep the default example)")
    console.print("3. Ask a question in natural language about your data")
    console.print("4. Copy and use the generated SQL in your database")
    console.print()

    console.print("💡 Commands you can use:")
    console.print("• help - Show this message")
    console.print("• examples - List example questions (enter 1-4 to ask one)")
    console.print("• schema - Show the current schema")
    console.print("• schema edit - Enter a new schema (finish with Esc then Enter)")
    console.print("• schema reset - Restore the example schema")
    console.print("• key - Enter a different API key")
    console.print("• copy - Print the last SQL without formatting")
    console.print("• clear - Clear the screen")
    console.print("• exit or quit - Leave")
    console.print()
