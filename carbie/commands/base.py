"""
Base command classes and registry.
"""
from abc import ABC, abstractmethod
from typing import Dict, Type, Optional, List
from pathlib import Path

from carbie.data import AnalysisLoader
from carbie.glucose import AbsorptionCurveCalculator, CurvePipeline
from carbie.models import AnalysisResult
from carbie.reports import ReportBuilder, Report


class CommandContext:
    """
    Shared context for all commands.

    Holds the current analysis and the collaborators commands need.
    Created once by the REPL and passed to each command.
    """

    def __init__(self, analysis_file: Path, chart_file: Path, export_file: Path,
                 num_samples: int = AbsorptionCurveCalculator.NUM_SAMPLES,
                 open_browser: bool = True):
        """
        Initialize command context.

        Args:
            analysis_file: Default analysis JSON file
            chart_file: Chart image output path
            export_file: Curve CSV output path
            num_samples: Curve sampling intervals
            open_browser: Open rendered charts in the browser
        """
        self.loader = AnalysisLoader(analysis_file)
        self.chart_file = Path(chart_file)
        self.export_file = Path(export_file)
        self.open_browser = open_browser

        calculator = AbsorptionCurveCalculator(num_samples=num_samples)
        self.report_builder = ReportBuilder(CurvePipeline(calculator))

        self.analysis: Optional[AnalysisResult] = None
        self.analysis_source: Optional[str] = None

    def set_analysis(self, analysis: AnalysisResult, source: str) -> None:
        """Make an analysis current."""
        self.analysis = analysis
        self.analysis_source = source

    def build_report(self) -> Optional[Report]:
        """
        Build a fresh report for the current analysis.

        Returns:
            Report, or None if nothing is loaded (prints a hint)
        """
        if self.analysis is None:
            print("\n(No analysis loaded. Use 'load <file>' or 'sample <name>' first.)\n")
            return None
        return self.report_builder.build(self.analysis)


class Command(ABC):
    """
    Base class for all commands.

    Each command should override:
    - name: Command name(s) that trigger it
    - help_text: Short description
    - execute(): Command logic
    """

    # Command name(s) - can be string or tuple of strings
    name: str | tuple = ""

    # Help text shown in help command
    help_text: str = ""

    def __init__(self, context: CommandContext):
        """
        Initialize command with context.

        Args:
            context: Shared command context
        """
        self.ctx = context

    @abstractmethod
    def execute(self, args: str) -> None:
        """
        Execute the command.

        Args:
            args: Command arguments (everything after the command name)
        """
        pass

    def matches(self, cmd: str) -> bool:
        """Check if command matches this handler."""
        if isinstance(self.name, str):
            return cmd.lower() == self.name.lower()
        else:
            return cmd.lower() in [n.lower() for n in self.name]


class CommandRegistry:
    """
    Registry for all available commands.

    Commands register themselves and can be looked up by name.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._commands: Dict[str, Type[Command]] = {}

    def register(self, command_class: Type[Command]) -> None:
        """
        Register a command class.

        Args:
            command_class: Command class to register
        """
        if isinstance(command_class.name, str):
            names = [command_class.name]
        else:
            names = list(command_class.name)

        for name in names:
            self._commands[name.lower()] = command_class

    def get(self, cmd: str) -> Optional[Type[Command]]:
        """Get command class for a command name, or None."""
        return self._commands.get(cmd.lower())

    def list_commands(self) -> List[str]:
        """Sorted list of all registered names (aliases included)."""
        return sorted(set(self._commands.keys()))

    def get_all_commands(self) -> List[Type[Command]]:
        """List of unique command classes."""
        seen = set()
        commands = []
        for cmd_class in self._commands.values():
            if cmd_class not in seen:
                seen.add(cmd_class)
                commands.append(cmd_class)
        return commands


# Global registry
_registry = CommandRegistry()


def register_command(command_class: Type[Command]) -> Type[Command]:
    """
    Decorator to register a command.

    Usage:
        @register_command
        class MyCommand(Command):
            name = "mycommand"
            ...
    """
    _registry.register(command_class)
    return command_class


def get_registry() -> CommandRegistry:
    """Get the global command registry."""
    return _registry
