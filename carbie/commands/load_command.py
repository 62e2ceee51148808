"""
Load commands - bring an analysis into the session.
"""
from pathlib import Path

from .base import Command, register_command
from carbie.data import get_sample, list_samples


@register_command
class LoadCommand(Command):
    """Load an analysis JSON file."""

    name = "load"
    help_text = "Load analysis JSON (load [file])"

    def execute(self, args: str) -> None:
        """
        Load analysis from disk.

        Args:
            args: Optional file path (defaults to the configured analysis file)
        """
        path = Path(args.strip()) if args.strip() else self.ctx.loader.filepath

        analysis = self.ctx.loader.load(path)
        if analysis is None:
            print(f"\n(Could not load analysis from {path})\n")
            return

        self.ctx.set_analysis(analysis, str(path))
        print(f"Loaded {len(analysis.ingredients)} ingredient(s) from {path}.")


@register_command
class SampleCommand(Command):
    """Load a bundled sample analysis."""

    name = ("sample", "test")
    help_text = "Load a bundled sample (sample [name]); no name lists samples"

    def execute(self, args: str) -> None:
        """
        Load bundled sample.

        Args:
            args: Sample name ("test", "test2", ...)
        """
        sample_name = args.strip()
        if not sample_name:
            print("Samples: " + ", ".join(list_samples()))
            return

        analysis = get_sample(sample_name)
        if analysis is None:
            print(f"Unknown sample '{sample_name}'. Samples: " + ", ".join(list_samples()))
            return

        self.ctx.set_analysis(analysis, f"sample '{sample_name.lower()}'")
        print(f"Loaded sample '{sample_name.lower()}' "
              f"({len(analysis.ingredients)} ingredient(s)).")


@register_command
class SaveCommand(Command):
    """Save the current analysis to JSON."""

    name = "save"
    help_text = "Save current analysis as JSON (save [file])"

    def execute(self, args: str) -> None:
        """
        Save analysis to disk.

        Args:
            args: Optional file path (defaults to the configured analysis file)
        """
        if self.ctx.analysis is None:
            print("\n(No analysis loaded.)\n")
            return

        path = Path(args.strip()) if args.strip() else self.ctx.loader.filepath
        written = self.ctx.loader.save(self.ctx.analysis, path)
        print(f"Analysis saved to {written}.")
