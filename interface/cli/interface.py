"""Interactive CLI interface for the Text-to-SQL assistant."""

import sys
from typing import Optional

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console
from rich.prompt import Confirm

from application.controllers import GenerationController
from infrastructure.logging import get_logger

from . import commands
from .display import show_help
from .session_state import FormState, create_form_state

logger = get_logger(__name__)


class TextToSQLCLI:
    """Interactive CLI that turns questions into SQL."""

    def __init__(
        self,
        controller: GenerationController,
        form: Optional[FormState] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.console = console or Console()
        self.form = form or create_form_state()
        self.history = InMemoryHistory()
        self.completer = WordCompleter(commands.COMMANDS, sentence=True)
        self.controller = controller

        self.console.print("🗄️  Text-to-SQL Assistant")
        self.console.print("Powered by Gemini. Ask questions about your schema in plain English!")
        self.console.print()

    def read_api_key(self) -> str:
        """Ask for the Gemini API key without echoing it."""
        return prompt("🔑 Gemini API key: ", is_password=True).strip()

    def read_schema(self) -> str:
        """Read a multi-line schema; Esc followed by Enter submits."""
        self.console.print("Paste your schema, then press Esc followed by Enter:")
        return prompt("", multiline=True, default=self.form.schema)

    def start_interactive_session(self) -> None:
        """Start an interactive session."""
        try:
            if not self.form.has_api_key:
                self.form.api_key = self.read_api_key()
            self.console.print("✓ Ready to generate SQL!")
            show_help(self.console)

            while True:
                try:
                    user_input = prompt(
                        "🔍 Your question: ",
                        history=self.history,
                        completer=self.completer,
                    ).strip()
                    if not user_input:
                        continue
                    if not commands.handle_command(self, user_input):
                        break
                except KeyboardInterrupt:
                    if Confirm.ask("\nDo you want to exit?"):
                        break
                except EOFError:
                    break
                except Exception as e:
                    self.console.print(f"I encountered an issue: {str(e)}", markup=False)
                    self.console.print(
                        "Let's try that again, or type 'help' for assistance."
                    )
                    logger.error(f"CLI error: {str(e)}")

            self.console.print("\n👋 Thanks for using the Text-to-SQL Assistant!")
        except Exception as e:
            self.console.print(f"I'm sorry, something went wrong: {str(e)}", markup=False)
            self.console.print("Please try restarting the application.")
            logger.error(f"Fatal CLI error: {str(e)}")
            sys.exit(1)
