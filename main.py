"""Main entry point for the Text-to-SQL assistant."""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from interface.cli.main import main as cli_main  # noqa: E402


def main() -> None:
    """Main entry point."""
    try:
        cli_main()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
