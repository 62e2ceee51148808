"""
Report commands - ingredient table, totals and curve summaries.
"""
from .base import Command, register_command


@register_command
class ReportCommand(Command):
    """Show the full analysis report."""

    name = ("report", "r")
    help_text = "Show message, ingredient table and totals"

    def execute(self, args: str) -> None:
        report = self.ctx.build_report()
        if report is None:
            return
        report.print()


@register_command
class TableCommand(Command):
    """Show the ingredient table only."""

    name = "table"
    help_text = "Show ingredient table"

    def execute(self, args: str) -> None:
        report = self.ctx.build_report()
        if report is None:
            return
        if not report.analysis.ingredients:
            print("\n(No ingredients)\n")
            return
        report.print_table()


@register_command
class TotalsCommand(Command):
    """Show meal totals."""

    name = "totals"
    help_text = "Show total measure, carbs and peak BG time"

    def execute(self, args: str) -> None:
        report = self.ctx.build_report()
        if report is None:
            return
        report.print_totals()


@register_command
class CurvesCommand(Command):
    """Summarize absorption curves."""

    name = ("curves", "timeline")
    help_text = "Summarize absorption curves (curves [--detail])"

    def execute(self, args: str) -> None:
        """
        Print curve summaries.

        Args:
            args: --detail adds kernel parameters and axis ticks
        """
        detail = "--detail" in args.split()

        report = self.ctx.build_report()
        if report is None:
            return
        report.print_curves(detail=detail)
