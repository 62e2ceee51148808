"""
Models for meal-level totals.
"""
from dataclasses import dataclass
from typing import Dict, Any

from carbie.parsers.formatting import format_number, round_half_up


PEAK_SOURCE_REPORTED = "reported"
PEAK_SOURCE_WEIGHTED = "weighted"


@dataclass
class AggregateTotals:
    """
    Represents totals for every ingredient of one analyzed meal.

    Attributes:
        total_weight_grams: Sum of solid amounts (g)
        total_volume_ml: Sum of liquid amounts (ml)
        total_carb_low: Sum of low carb estimates (g)
        total_carb_high: Sum of high carb estimates (g)
        peak_minutes: Aggregate peak BG time (minutes)
        peak_source: "reported" (from the service) or "weighted" (computed)

    Example:
        >>> totals = AggregateTotals(total_weight_grams=200, total_volume_ml=50)
        >>> totals.format_measure()
        '200g + 50ml'
    """
    total_weight_grams: float = 0.0
    total_volume_ml: float = 0.0
    total_carb_low: float = 0.0
    total_carb_high: float = 0.0
    peak_minutes: int = 0
    peak_source: str = PEAK_SOURCE_WEIGHTED

    def measure_kind(self) -> str:
        """Describe what the measure covers."""
        if self.total_weight_grams > 0 and self.total_volume_ml > 0:
            return "Food + Liquid"
        elif self.total_weight_grams > 0:
            return "Food"
        elif self.total_volume_ml > 0:
            return "Liquid"
        return ""

    def format_measure(self) -> str:
        """Format weight and volume ("200g + 50ml", "200g", "50ml" or "0g")."""
        weight = f"{format_number(self.total_weight_grams)}g"
        volume = f"{format_number(self.total_volume_ml)}ml"
        if self.total_weight_grams > 0 and self.total_volume_ml > 0:
            return f"{weight} + {volume}"
        elif self.total_weight_grams > 0:
            return weight
        elif self.total_volume_ml > 0:
            return volume
        return "0g"

    def format_carb_range(self) -> str:
        """Format total carb range, collapsing to one value when low == high."""
        if self.total_carb_low == self.total_carb_high:
            return f"{format_number(self.total_carb_low)}g"
        return (f"{format_number(self.total_carb_low)}-"
                f"{format_number(self.total_carb_high)}g")

    def carb_midpoint(self) -> int:
        """Rounded midpoint of the total carb range."""
        return round_half_up((self.total_carb_high + self.total_carb_low) / 2)

    def carb_spread(self) -> int:
        """Rounded half-width of the total carb range."""
        return round_half_up((self.total_carb_high - self.total_carb_low) / 2)

    def format_carb_estimate(self) -> str:
        """Format carbs as midpoint and spread, e.g. '70g (+/-13g)'."""
        return f"{self.carb_midpoint()}g (+/-{self.carb_spread()}g)"

    def format_peak_time(self) -> str:
        return f"{self.peak_minutes}min"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "total_weight_g": self.total_weight_grams,
            "total_volume_ml": self.total_volume_ml,
            "total_carb_low": self.total_carb_low,
            "total_carb_high": self.total_carb_high,
            "peak_minutes": self.peak_minutes,
            "peak_source": self.peak_source,
        }
