"""Command handling for the Text-to-SQL CLI."""
from typing import List

from domain.prompting import EXAMPLE_QUESTIONS

from . import display, session

COMMANDS: List[str] = [
    'help', 'exit', 'quit', 'clear', 'examples', 'schema', 'schema edit',
    'schema reset', 'key', 'copy',
]


def handle_command(cli, user_input: str) -> bool:
    """Handle a user command. Returns False to exit."""
    command = user_input.lower()

    if command in ('exit', 'quit'):
        return False
    if command == 'help':
        display.show_help(cli.console)
        return True
    if command == 'clear':
        cli.console.clear()
        return True
    if command == 'examples':
        display.show_examples(cli.console)
        return True
    if command == 'schema':
        display.show_schema(cli.console, cli.form.schema)
        return True
    if command == 'schema edit':
        cli.form.schema = cli.read_schema()
        cli.console.print("✓ Schema updated.")
        return True
    if command == 'schema reset':
        cli.form.reset_schema()
        cli.console.print("✓ Restored the example schema.")
        return True
    if command == 'key':
        cli.form.api_key = cli.read_api_key()
        return True
    if command == 'copy':
        result = cli.controller.state.result
        if result is None:
            cli.console.print("Nothing to copy yet. Ask a question first!")
        else:
            cli.console.print(result.sql, markup=False, highlight=False, soft_wrap=True)
        return True
    if command.isdigit() and 1 <= int(command) <= len(EXAMPLE_QUESTIONS):
        question = EXAMPLE_QUESTIONS[int(command) - 1]
        cli.console.print(f"Question: {question}")
        process_query(cli, question)
        return True

    process_query(cli, user_input)
    return True


def process_query(cli, question: str) -> None:
    """Generate SQL for a question and render the outcome."""
    if not cli.form.has_api_key:
        cli.form.api_key = cli.read_api_key()

    session.generate_with_progress(cli.console, cli.controller, cli.form, question)
    display.display_state(cli.console, cli.controller.state)
