"""
Carbie - Main Entry Point

Terminal front end for carb absorption analysis of meals.
"""
import logging

from config import (
    ANALYSIS_FILE, CHART_OUTPUT_FILE, CURVES_EXPORT_FILE, NUM_SAMPLES,
    LOG_LEVEL, MODE, verify_data_files,
)
from carbie.app_logging import configure_logging
from carbie.commands import CommandContext, get_registry

logger = logging.getLogger("carbie.main")


def print_welcome():
    """Print welcome message."""
    print("=" * 70)
    print("  Carbie - Carb Absorption Timeline")
    print("  Type 'help' for commands, 'quit' to exit")
    print("=" * 70)
    print()


def dispatch(ctx: CommandContext, user_input: str) -> bool:
    """
    Run one line of input.

    Args:
        ctx: Shared command context
        user_input: Raw input line

    Returns:
        False if the line was not a known command
    """
    parts = user_input.strip().split(maxsplit=1)
    if not parts:
        return True

    cmd_name = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""

    cmd_class = get_registry().get(cmd_name)
    if cmd_class is None:
        print(f"Unknown command: '{cmd_name}'. Type 'help' for available commands.")
        return False

    cmd = cmd_class(ctx)
    cmd.execute(args)
    return True


def repl():
    """
    Main Read-Eval-Print Loop.

    Handles user input and dispatches to registered commands.
    """
    try:
        verify_data_files()
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("\nPlease check your configuration and ensure the data directory exists.")
        return

    print_welcome()

    ctx = CommandContext(ANALYSIS_FILE, CHART_OUTPUT_FILE, CURVES_EXPORT_FILE,
                         num_samples=NUM_SAMPLES)

    while True:
        try:
            user_input = input("> ").strip()

            if not user_input:
                continue

            try:
                dispatch(ctx, user_input)
            except SystemExit:
                raise
            except Exception as e:
                print(f"Error executing command: {e}")
                if MODE == "DEVELOPMENT":
                    logger.exception("Command failed: %s", user_input)

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break
        except SystemExit:
            break


def main():
    """Main entry point."""
    configure_logging(LOG_LEVEL)
    try:
        repl()
    except KeyboardInterrupt:
        print("\nInterrupted. Goodbye!")
    except Exception as e:
        print(f"Fatal error: {e}")
        if MODE == "DEVELOPMENT":
            logger.exception("Fatal error")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
