"""
Core data models for analyzed ingredients.
"""
import math
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from carbie.parsers.formatting import format_number


# Display palette, indexed by the ingredient's position in the analysis
CHART_COLORS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7",
    "#DDA0DD", "#98D8C8", "#F7DC6F", "#BB8FCE", "#85C1E9",
]


def _safe_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Convert a wire value to a finite float, falling back to default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


@dataclass(frozen=True)
class IngredientRecord:
    """
    One food item detected by the meal analysis service.

    Attributes:
        name: Free-text ingredient label
        is_liquid: True when amount is a volume (ml), False for mass (g)
        amount: Measured quantity in the unit implied by is_liquid
        carb_low: Low carbohydrate estimate (g)
        carb_high: High carbohydrate estimate (g)
        glycemic_index: GI in [0, 100]
        peak_time_label: Free-text peak time such as "90min" or "1.5h"

    Example:
        >>> rec = IngredientRecord("Potato", False, 200, 30, 40, 70, "90min")
        >>> rec.format_amount()
        '200g'
    """
    name: str
    is_liquid: bool = False
    amount: float = 0.0
    carb_low: float = 0.0
    carb_high: float = 0.0
    glycemic_index: float = 0.0
    peak_time_label: str = ""

    def __post_init__(self):
        """Replace non-finite quantities with 0."""
        for name in ("amount", "carb_low", "carb_high", "glycemic_index"):
            object.__setattr__(self, name, _safe_float(getattr(self, name)))

    @property
    def carb_amount(self) -> float:
        """Representative carbohydrate amount (midpoint of low/high)."""
        return (self.carb_low + self.carb_high) / 2

    @property
    def has_carbs(self) -> bool:
        """True when the ingredient contributes any carbohydrate."""
        return (self.carb_low + self.carb_high) != 0

    def format_amount(self) -> str:
        """Format measured quantity with its unit ("200g" or "50ml")."""
        unit = "ml" if self.is_liquid else "g"
        return f"{format_number(self.amount)}{unit}"

    def format_carb_range(self) -> str:
        """Format carb estimate ("35g" or "30-40g")."""
        if self.carb_low == self.carb_high:
            return f"{format_number(self.carb_low)}g"
        return f"{format_number(self.carb_low)}-{format_number(self.carb_high)}g"

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the analysis service's wire format.

        Returns:
            Dictionary keyed like the service's ingredient objects
        """
        return {
            "ingredient": self.name,
            "is_liquid": self.is_liquid,
            "estimated_weight_volume": self.amount,
            "low_carb_estimate": self.carb_low,
            "high_carb_estimate": self.carb_high,
            "gi_index": self.glycemic_index,
            "peak_bg_time": self.peak_time_label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IngredientRecord':
        """
        Create from the analysis service's wire format.

        Missing or non-numeric values become 0; missing text becomes "".

        Args:
            data: Ingredient dictionary

        Returns:
            IngredientRecord instance
        """
        peak = data.get("peak_bg_time")
        return cls(
            name=str(data.get("ingredient") or ""),
            is_liquid=bool(data.get("is_liquid", False)),
            amount=_safe_float(data.get("estimated_weight_volume")),
            carb_low=_safe_float(data.get("low_carb_estimate")),
            carb_high=_safe_float(data.get("high_carb_estimate")),
            glycemic_index=_safe_float(data.get("gi_index")),
            peak_time_label="" if peak is None else str(peak),
        )


@dataclass(frozen=True)
class NormalizedIngredient:
    """
    Ingredient prepared for curve synthesis.

    color_index comes from the ingredient's position in the original
    (unfiltered) list, so dropping a zero-carb item never shifts colors.
    """
    name: str
    peak_minutes: float
    carb_amount: float
    glycemic_index: float
    color_index: int = 0

    @property
    def color(self) -> str:
        """Palette color for this ingredient."""
        return CHART_COLORS[self.color_index % len(CHART_COLORS)]

    def format_legend(self) -> str:
        """Legend label, e.g. 'Potato (GI: 70)'."""
        return f"{self.name} (GI: {format_number(self.glycemic_index)})"


@dataclass
class AnalysisResult:
    """
    Structured output of one meal analysis.

    Attributes:
        is_food_related: False when the prompt was not about food
        ingredients: Detected ingredients, in service order
        aggregated_peak_minutes: Peak BG time computed by the service (optional)
        message: Short summary text from the service
        model_name: Model that produced the analysis (optional)
        prompt: Original user prompt (optional)
        elapsed_seconds: Service processing time (optional)
    """
    is_food_related: bool = True
    ingredients: List[IngredientRecord] = field(default_factory=list)
    aggregated_peak_minutes: Optional[int] = None
    message: str = ""
    model_name: Optional[str] = None
    prompt: Optional[str] = None
    elapsed_seconds: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the service's full result format."""
        structured: Dict[str, Any] = {
            "is_food_related": self.is_food_related,
            "ingredients": [i.to_dict() for i in self.ingredients],
            "message": self.message,
        }
        if self.aggregated_peak_minutes is not None:
            structured["aggregated_peak_bg_time_minutes"] = self.aggregated_peak_minutes

        data: Dict[str, Any] = {"structured_data": structured}
        if self.model_name is not None:
            data["model_name"] = self.model_name
        if self.prompt is not None:
            data["prompt"] = self.prompt
        if self.elapsed_seconds is not None:
            data["elapsed_time_seconds"] = self.elapsed_seconds
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisResult':
        """
        Create from either the full result or bare structured data.

        Args:
            data: {"structured_data": {...}, ...} or {"ingredients": [...], ...}

        Returns:
            AnalysisResult instance
        """
        structured = data.get("structured_data")
        if not isinstance(structured, dict):
            structured = data

        raw_items = structured.get("ingredients") or []
        ingredients = [IngredientRecord.from_dict(item)
                       for item in raw_items if isinstance(item, dict)]

        peak = _safe_float(structured.get("aggregated_peak_bg_time_minutes"), default=None)
        aggregated_peak = None if peak is None else int(peak)

        elapsed = data.get("elapsed_time_seconds")

        return cls(
            is_food_related=bool(structured.get("is_food_related", True)),
            ingredients=ingredients,
            aggregated_peak_minutes=aggregated_peak,
            message=str(structured.get("message") or ""),
            model_name=data.get("model_name"),
            prompt=data.get("prompt"),
            elapsed_seconds=_safe_float(elapsed) if elapsed is not None else None,
        )
