"""
Basic commands: help, quit, status.
"""
from .base import Command, register_command, get_registry


@register_command
class HelpCommand(Command):
    """Show help information."""

    name = ("help", "h", "?")
    help_text = "Show this help message"

    def execute(self, args: str) -> None:
        """Display help for all commands."""
        registry = get_registry()

        print("\nAvailable Commands:")
        print("=" * 70)

        commands = registry.get_all_commands()
        commands.sort(key=lambda c: c.name if isinstance(c.name, str) else c.name[0])

        for cmd_class in commands:
            if isinstance(cmd_class.name, str):
                names = cmd_class.name
            else:
                names = ", ".join(cmd_class.name)

            print(f"  {names:20} {cmd_class.help_text}")

        print("=" * 70)
        print()


@register_command
class QuitCommand(Command):
    """Exit the application."""

    name = ("quit", "exit", "q")
    help_text = "Exit the application"

    def execute(self, args: str) -> None:
        """Exit with message."""
        print("Goodbye!")
        raise SystemExit(0)


@register_command
class StatusCommand(Command):
    """Show what is currently loaded."""

    name = "status"
    help_text = "Show the current analysis"

    def execute(self, args: str) -> None:
        """Display loaded analysis summary."""
        analysis = self.ctx.analysis

        if analysis is None:
            print("No analysis loaded.")
            return

        carb_items = sum(1 for rec in analysis.ingredients if rec.has_carbs)
        print(f"Analysis from {self.ctx.analysis_source}: "
              f"{len(analysis.ingredients)} ingredient(s), {carb_items} with carbs.")
        if analysis.prompt:
            print(f"  Prompt: {analysis.prompt}")
        if analysis.model_name:
            print(f"  Model: {analysis.model_name}")
