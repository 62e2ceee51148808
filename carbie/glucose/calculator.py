"""
Carbohydrate absorption curve calculator.

Models each ingredient's blood glucose impact over time with a gamma-shaped
kernel. Glycemic index drives the shape: higher GI gives a sharper,
front-loaded rise with a longer tail, lower GI a slower, more symmetric hump.
The curve is scaled so its peak equals the ingredient's carb amount.
"""
import logging
import math
from dataclasses import dataclass
from typing import List

from carbie.models import AbsorptionCurve, CurvePoint, NormalizedIngredient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeParameters:
    """Gamma kernel parameters derived from glycemic index."""
    skewness: float
    alpha: float  # shape, 2-4
    beta: float   # rate
    mode: float   # kernel argument at which the curve peaks


def shape_parameters(glycemic_index: float) -> ShapeParameters:
    """
    Derive kernel shape from GI (0-100).

    skewness runs 1.5 -> 3 and alpha runs 2 -> 4 as GI goes 0 -> 100.
    GI outside that range is clamped.
    """
    if not math.isfinite(glycemic_index):
        glycemic_index = 0.0
    glycemic_index = min(max(glycemic_index, 0.0), 100.0)
    skewness = 1.5 + (glycemic_index / 100 * 1.5)
    alpha = 2 + (glycemic_index / 100 * 2)
    beta = 1 / skewness
    mode = (alpha - 1) / beta
    return ShapeParameters(skewness=skewness, alpha=alpha, beta=beta, mode=mode)


def gamma_kernel(x: float, alpha: float, beta: float) -> float:
    """Unnormalized gamma density x^(alpha-1) * e^(-x*beta) * beta^alpha, for x > 0."""
    if x <= 0:
        return 0.0
    return math.pow(x, alpha - 1) * math.exp(-x * beta) * math.pow(beta, alpha)


def tail_dampening(t: float, peak_minutes: float) -> float:
    """
    Extra decay multiplier for the long tail.

    1.0 up to 3x the peak time, then exp(-(t - 3p) / 2p).
    """
    tail_start = peak_minutes * 3
    if t <= tail_start:
        return 1.0
    return math.exp(-((t - tail_start) / (peak_minutes * 2)))


class AbsorptionCurveCalculator:
    """
    Builds sampled absorption curves for normalized ingredients.

    Two passes per curve: a dense calibration pass measures the kernel's
    peak on the chart's time grid, then the sampling pass rescales so the
    peak lands on the ingredient's carb amount.
    """

    NUM_SAMPLES = 100         # Intervals in the output curve
    CALIBRATION_POINTS = 200  # Intervals in the peak-finding grid

    def __init__(self, num_samples: int = NUM_SAMPLES,
                 calibration_points: int = CALIBRATION_POINTS):
        """
        Initialize calculator.

        Args:
            num_samples: Output intervals (num_samples + 1 points)
            calibration_points: Calibration intervals
        """
        self.num_samples = max(1, int(num_samples))
        self.calibration_points = max(1, int(calibration_points))

    def build_curve(self, ingredient: NormalizedIngredient,
                    time_range_minutes: float) -> AbsorptionCurve:
        """
        Synthesize the absorption curve for one ingredient.

        Args:
            ingredient: Normalized ingredient
            time_range_minutes: Shared chart time range

        Returns:
            AbsorptionCurve; empty when the ingredient has no carbs
        """
        carb_amount = ingredient.carb_amount
        if carb_amount == 0:
            return AbsorptionCurve(ingredient=ingredient, points=[])

        peak = ingredient.peak_minutes
        params = shape_parameters(ingredient.glycemic_index)

        max_height = self.calibrate(peak, params, time_range_minutes)
        if not self._usable(peak, max_height, time_range_minutes):
            logger.debug("Degenerate curve for %r (peak=%s, max=%s), emitting zeros",
                         ingredient.name, peak, max_height)
            return AbsorptionCurve(ingredient=ingredient,
                                   points=self._zero_points(time_range_minutes))

        normalization = carb_amount / max_height
        points: List[CurvePoint] = []

        for i in range(self.num_samples + 1):
            t = (i / self.num_samples) * time_range_minutes
            height = 0.0
            if t > 0:
                x = (t / peak) * params.mode
                height = gamma_kernel(x, params.alpha, params.beta) * normalization
                height *= tail_dampening(t, peak)
                height = min(height, carb_amount)
            points.append(CurvePoint(time_minutes=t, impact=height))

        return AbsorptionCurve(ingredient=ingredient, points=points)

    def calibrate(self, peak_minutes: float, params: ShapeParameters,
                  time_range_minutes: float) -> float:
        """
        Find the kernel's maximum over the calibration grid.

        Returns:
            Highest kernel value seen (0.0 if none is computable)
        """
        if peak_minutes <= 0 or time_range_minutes <= 0:
            return 0.0

        max_height = 0.0
        for i in range(self.calibration_points + 1):
            t = (i / self.calibration_points) * time_range_minutes
            if t > 0:
                x = (t / peak_minutes) * params.mode
                value = gamma_kernel(x, params.alpha, params.beta)
                if math.isfinite(value):
                    max_height = max(max_height, value)
        return max_height

    def _usable(self, peak: float, max_height: float, time_range: float) -> bool:
        return (peak > 0 and time_range > 0
                and math.isfinite(max_height) and max_height > 0)

    def _zero_points(self, time_range_minutes: float) -> List[CurvePoint]:
        return [
            CurvePoint(time_minutes=(i / self.num_samples) * time_range_minutes, impact=0.0)
            for i in range(self.num_samples + 1)
        ]
