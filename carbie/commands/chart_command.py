"""
Chart commands - render the absorption chart and export curve samples.
"""
from pathlib import Path

from .base import Command, register_command
from carbie.reports import ChartBuilder, export_curves


@register_command
class ChartCommand(Command):
    """Render the carb absorption chart."""

    name = "chart"
    help_text = "Render absorption chart image (chart [title])"

    def execute(self, args: str) -> None:
        """
        Render chart.

        Args:
            args: Optional chart title
        """
        report = self.ctx.build_report()
        if report is None:
            return

        title = args.strip() or self.ctx.analysis.message or None
        builder = ChartBuilder(self.ctx.chart_file)
        builder.build(report.chart, title=title, open_browser=self.ctx.open_browser)


@register_command
class ExportCommand(Command):
    """Export sampled curves to CSV."""

    name = "export"
    help_text = "Export curve samples to CSV (export [file])"

    def execute(self, args: str) -> None:
        """
        Export curves.

        Args:
            args: Optional output path (defaults to the configured export file)
        """
        report = self.ctx.build_report()
        if report is None:
            return

        if report.chart.is_empty:
            print("\n(No carb-bearing ingredients - nothing to export)\n")
            return

        output = Path(args.strip()) if args.strip() else self.ctx.export_file
        rows = export_curves(report.chart, output)
        print(f"Exported {rows} sample(s) for {len(report.chart.curves)} curve(s) to {output}.")
