"""
Report builder for analyzed meals.

Shows the service message, the per-ingredient table, meal totals and
curve summaries in the terminal.
"""
from pathlib import Path
from typing import List, Dict, Optional

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from carbie.glucose import CurvePipeline, shape_parameters
from carbie.models import AnalysisResult, CurveChart, PEAK_SOURCE_REPORTED
from carbie.parsers import format_number

CURVE_COLUMNS = ["ingredient", "color", "gi", "time_min", "impact_g"]


class ReportBuilder:
    """
    Builds reports from analysis results.

    Runs the curve pipeline once per analysis and wraps the result.
    """

    def __init__(self, pipeline: Optional[CurvePipeline] = None):
        """
        Initialize report builder.

        Args:
            pipeline: Curve pipeline (default settings if omitted)
        """
        self.pipeline = pipeline or CurvePipeline()

    def build(self, analysis: AnalysisResult) -> 'Report':
        """
        Build report for one analysis.

        Args:
            analysis: Loaded analysis result

        Returns:
            Report with chart data and totals
        """
        chart = self.pipeline.build(analysis.ingredients, analysis.aggregated_peak_minutes)
        return Report(analysis, chart)


class Report:
    """
    Container for one meal's report.

    Attributes:
        analysis: Source analysis
        chart: Pipeline output (curves, scale, ticks, totals)
    """

    def __init__(self, analysis: AnalysisResult, chart: CurveChart):
        self.analysis = analysis
        self.chart = chart

    def ingredient_rows(self) -> List[Dict[str, str]]:
        """Display rows: ingredient, amount, carbs, peak."""
        return [
            {
                "ingredient": rec.name,
                "amount": rec.format_amount(),
                "carbs": rec.format_carb_range(),
                "peak": rec.peak_time_label,
            }
            for rec in self.analysis.ingredients
        ]

    def print(self, console: Optional[Console] = None) -> None:
        """Print message, ingredient table and totals."""
        console = console or Console()

        if self.analysis.message:
            console.print(f"\n[bold green]{escape(self.analysis.message)}[/bold green]")

        if not self.analysis.is_food_related:
            console.print("(Not a food-related analysis)\n")
            return

        if not self.analysis.ingredients:
            console.print("(No ingredients)\n")
            return

        self.print_table(console)
        self.print_totals(console)

    def print_table(self, console: Optional[Console] = None) -> None:
        """Print the per-ingredient table."""
        console = console or Console()

        table = Table(title="Ingredients", header_style="bold green")
        table.add_column("Ingredient")
        table.add_column("Amount", justify="right")
        table.add_column("Carbs", justify="right")
        table.add_column("Peak BG", justify="right")

        for row in self.ingredient_rows():
            table.add_row(escape(row["ingredient"]), row["amount"],
                          row["carbs"], escape(row["peak"]))

        console.print(table)

    def print_totals(self, console: Optional[Console] = None) -> None:
        """Print meal totals."""
        console = console or Console()
        totals = self.chart.totals

        peak_note = "reported" if totals.peak_source == PEAK_SOURCE_REPORTED else "weighted average"
        measure_note = f" ({totals.measure_kind()})" if totals.measure_kind() else ""

        console.print("\n[bold]Total - Estimated Carb Effect[/bold]")
        console.print(f"  Measure:  {totals.format_measure()}{measure_note}")
        console.print(f"  Carbs:    {totals.format_carb_estimate()}  "
                      f"[dim]range {totals.format_carb_range()}[/dim]")
        console.print(f"  Peak BG:  {totals.format_peak_time()} [dim]({peak_note})[/dim]")
        console.print()

    def print_curves(self, console: Optional[Console] = None, detail: bool = False) -> None:
        """
        Print one line per absorption curve.

        Args:
            console: Output console
            detail: Also show kernel parameters and axis ticks
        """
        console = console or Console()

        if self.chart.is_empty:
            console.print("\n(No carb-bearing ingredients - nothing to chart)\n")
            return

        scale = self.chart.scale
        console.print(f"\n[bold]Carb Absorption Timeline[/bold] "
                      f"(0-{format_number(scale.time_range_minutes)} min, "
                      f"0-{format_number(scale.carb_range_grams)} g)")

        for curve in self.chart.curves:
            peak = curve.peak()
            ing = curve.ingredient
            console.print(
                f"  [{curve.color}]■[/] {escape(ing.format_legend()):32} "
                f"carbs {ing.carb_amount:5.1f}g  "
                f"peak {peak.impact:5.1f}g @ {format_number(round(peak.time_minutes, 1))} min"
            )
            if detail:
                params = shape_parameters(ing.glycemic_index)
                console.print(f"      [dim]alpha={params.alpha:.2f} beta={params.beta:.3f} "
                              f"skew={params.skewness:.2f} "
                              f"expected peak={format_number(ing.peak_minutes)} min[/dim]")

        if detail:
            console.print("  Time ticks: " + ", ".join(t.label for t in self.chart.time_ticks))
            console.print("  Carb ticks: " + ", ".join(t.label for t in self.chart.carb_ticks))

        console.print("[dim italic]Higher GI foods show faster absorption with extended tails[/dim italic]\n")

    def curve_frame(self) -> pd.DataFrame:
        """Sampled curves as a long-form table."""
        return curve_frame(self.chart)


def curve_frame(chart: CurveChart) -> pd.DataFrame:
    """
    Flatten chart curves into one row per sample.

    Columns: ingredient, color, gi, time_min, impact_g
    """
    records = []
    for curve in chart.curves:
        for point in curve.points:
            records.append({
                "ingredient": curve.name,
                "color": curve.color,
                "gi": curve.glycemic_index,
                "time_min": point.time_minutes,
                "impact_g": point.impact,
            })
    return pd.DataFrame.from_records(records, columns=CURVE_COLUMNS)


def export_curves(chart: CurveChart, output_file: Path) -> int:
    """
    Write sampled curves to CSV.

    Returns:
        Number of rows written
    """
    df = curve_frame(chart)
    df.to_csv(output_file, index=False)
    return len(df)
