"""
Chart builder for carb absorption timelines.

Draws every ingredient's absorption curve on one shared time/carb axis,
using the tick positions from the scale planner.
"""
import numpy as np
import matplotlib
matplotlib.use("Agg")  # Headless backend
import matplotlib.pyplot as plt
import webbrowser
import os
from pathlib import Path
from typing import Optional

from carbie.models import CurveChart


class ChartBuilder:
    """
    Builds carb absorption charts.

    Creates a single-panel chart showing:
    - One colored line per carb-bearing ingredient
    - Dashed grid at the planner's time and carb ticks
    - Legend with each ingredient's GI
    """

    def __init__(self, output_file: Path = Path("carb_absorption.jpg")):
        """
        Initialize chart builder.

        Args:
            output_file: Output file path
        """
        self.output_file = Path(output_file)

    def build(self, chart: CurveChart, title: Optional[str] = None,
              open_browser: bool = True) -> Optional[Path]:
        """
        Render chart data to the output file.

        Args:
            chart: Pipeline output
            title: Chart title (optional)
            open_browser: Open the saved image afterwards

        Returns:
            Path written, or None when there was nothing to draw
        """
        if chart.is_empty:
            print("(no carb-bearing ingredients to chart)")
            return None

        self._create_chart(chart, title)

        if open_browser:
            webbrowser.open(os.path.abspath(self.output_file))
            print(f"Chart saved to {self.output_file} and opened in browser.")
        else:
            print(f"Chart saved to {self.output_file}.")

        return self.output_file

    def _create_chart(self, chart: CurveChart, title: Optional[str]) -> None:
        """Create and save the chart."""
        scale = chart.scale

        fig, ax = plt.subplots(1, 1, figsize=(10, 5), constrained_layout=True)

        for curve in chart.curves:
            times = np.asarray(curve.times, dtype=float)
            impacts = np.asarray(curve.impacts, dtype=float)
            ax.plot(times, impacts,
                    color=curve.color, linewidth=2.5, solid_capstyle="round",
                    label=curve.ingredient.format_legend())

        if scale.time_range_minutes > 0:
            ax.set_xlim(0, scale.time_range_minutes)
        if scale.carb_range_grams > 0:
            ax.set_ylim(0, scale.carb_range_grams)

        ax.set_xticks([t.value for t in chart.time_ticks])
        ax.set_xticklabels([t.label for t in chart.time_ticks], fontsize=9, color="#666")
        ax.set_yticks([t.value for t in chart.carb_ticks])
        ax.set_yticklabels([t.label for t in chart.carb_ticks], fontsize=9, color="#666")

        ax.grid(True, color="#E0E0E0", linestyle="--", linewidth=0.5)
        ax.set_xlabel("Time")
        ax.set_ylabel("Carbs (g)")
        ax.legend(loc="upper right", frameon=False)

        ax.set_title(title or "Carb Absorption Timeline", fontsize=14, color="#2E7D32")
        fig.text(0.5, 0.005,
                 "Higher GI foods show faster absorption with extended tails",
                 ha="center", fontsize=9, color="#666", style="italic")

        # Save
        fig.savefig(self.output_file, dpi=150)
        plt.close(fig)
