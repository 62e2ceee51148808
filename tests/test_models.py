"""
Tests for data models.
"""
import pytest
from carbie.models import (
    IngredientRecord, NormalizedIngredient, AnalysisResult,
    AggregateTotals, AbsorptionCurve, CurvePoint,
    CHART_COLORS, PEAK_SOURCE_REPORTED,
)


# IngredientRecord tests
def test_record_carb_amount():
    """Test carb amount is the low/high midpoint."""
    rec = IngredientRecord("Potato", False, 200, 30, 40, 70, "90min")
    assert rec.carb_amount == 35
    assert rec.has_carbs


def test_record_inverted_range_not_validated():
    """Test low > high still yields the midpoint."""
    rec = IngredientRecord("Odd", carb_low=40, carb_high=30)
    assert rec.carb_amount == 35


def test_record_zero_carbs():
    """Test zero-carb detection."""
    rec = IngredientRecord("Lamb", False, 150, 0, 0, 0, "0min")
    assert not rec.has_carbs


def test_record_format_amount():
    """Test unit follows the liquid flag."""
    assert IngredientRecord("Potato", False, 200).format_amount() == "200g"
    assert IngredientRecord("Gravy", True, 50).format_amount() == "50ml"
    assert IngredientRecord("Soup", True, 12.5).format_amount() == "12.5ml"


def test_record_format_carb_range():
    """Test range collapses when low == high."""
    assert IngredientRecord("A", carb_low=30, carb_high=40).format_carb_range() == "30-40g"
    assert IngredientRecord("B", carb_low=30, carb_high=30).format_carb_range() == "30g"


def test_record_from_dict():
    """Test creation from service wire format."""
    data = {
        "ingredient": "Gravy",
        "is_liquid": True,
        "estimated_weight_volume": 50,
        "low_carb_estimate": 2,
        "high_carb_estimate": 5,
        "gi_index": 20,
        "peak_bg_time": "45min",
    }
    rec = IngredientRecord.from_dict(data)
    assert rec.name == "Gravy"
    assert rec.is_liquid is True
    assert rec.amount == 50
    assert rec.carb_low == 2
    assert rec.carb_high == 5
    assert rec.glycemic_index == 20
    assert rec.peak_time_label == "45min"
    assert rec.to_dict() == data


def test_record_from_dict_defaults():
    """Test missing and malformed values fall back."""
    rec = IngredientRecord.from_dict({"gi_index": "70", "low_carb_estimate": "n/a"})
    assert rec.name == ""
    assert rec.is_liquid is False
    assert rec.amount == 0.0
    assert rec.carb_low == 0.0
    assert rec.glycemic_index == 70.0
    assert rec.peak_time_label == ""


# NormalizedIngredient tests
def test_normalized_color():
    """Test palette lookup wraps around."""
    assert NormalizedIngredient("A", 90, 35, 70, color_index=0).color == "#FF6B6B"
    assert NormalizedIngredient("B", 90, 35, 70, color_index=9).color == "#85C1E9"
    assert NormalizedIngredient("C", 90, 35, 70, color_index=10).color == CHART_COLORS[0]


def test_normalized_legend():
    """Test legend label includes GI."""
    assert NormalizedIngredient("Potato", 90, 35, 70.0).format_legend() == "Potato (GI: 70)"


# AnalysisResult tests
def test_analysis_from_full_result():
    """Test parsing the full service response."""
    data = {
        "model_name": "m",
        "prompt": "potato",
        "elapsed_time_seconds": 1.5,
        "structured_data": {
            "is_food_related": True,
            "ingredients": [{"ingredient": "Potato", "low_carb_estimate": 30}],
            "aggregated_peak_bg_time_minutes": 75,
            "message": "ok",
        },
    }
    analysis = AnalysisResult.from_dict(data)
    assert analysis.is_food_related
    assert len(analysis.ingredients) == 1
    assert analysis.ingredients[0].name == "Potato"
    assert analysis.aggregated_peak_minutes == 75
    assert analysis.message == "ok"
    assert analysis.model_name == "m"
    assert analysis.prompt == "potato"
    assert analysis.elapsed_seconds == 1.5


def test_analysis_from_structured_data():
    """Test parsing bare structured data without aggregate peak."""
    analysis = AnalysisResult.from_dict({
        "is_food_related": False,
        "ingredients": [],
        "message": "Not food",
    })
    assert not analysis.is_food_related
    assert analysis.ingredients == []
    assert analysis.aggregated_peak_minutes is None
    assert analysis.message == "Not food"


def test_analysis_skips_bad_entries():
    """Test non-dict ingredients and bad peak values are ignored."""
    analysis = AnalysisResult.from_dict({
        "ingredients": [{"ingredient": "Rice"}, "junk", None],
        "aggregated_peak_bg_time_minutes": "soon",
    })
    assert [i.name for i in analysis.ingredients] == ["Rice"]
    assert analysis.aggregated_peak_minutes is None


def test_analysis_to_dict():
    """Test serialization uses the full response format."""
    analysis = AnalysisResult(
        ingredients=[IngredientRecord("Rice", carb_low=40, carb_high=45)],
        aggregated_peak_minutes=60,
        message="Rice bowl",
    )
    data = analysis.to_dict()
    structured = data["structured_data"]
    assert structured["aggregated_peak_bg_time_minutes"] == 60
    assert structured["ingredients"][0]["ingredient"] == "Rice"
    assert "model_name" not in data


# AggregateTotals tests
def test_totals_defaults():
    """Test AggregateTotals default values."""
    totals = AggregateTotals()
    assert totals.total_weight_grams == 0
    assert totals.format_measure() == "0g"
    assert totals.measure_kind() == ""
    assert totals.format_peak_time() == "0min"


def test_totals_format_measure():
    """Test weight/volume display combinations."""
    assert AggregateTotals(200, 50).format_measure() == "200g + 50ml"
    assert AggregateTotals(200, 50).measure_kind() == "Food + Liquid"
    assert AggregateTotals(200, 0).format_measure() == "200g"
    assert AggregateTotals(200, 0).measure_kind() == "Food"
    assert AggregateTotals(0, 50).format_measure() == "50ml"
    assert AggregateTotals(0, 50).measure_kind() == "Liquid"


def test_totals_format_carbs():
    """Test carb range and midpoint display."""
    totals = AggregateTotals(total_carb_low=47, total_carb_high=72)
    assert totals.format_carb_range() == "47-72g"
    assert totals.carb_midpoint() == 60
    assert totals.carb_spread() == 13
    assert totals.format_carb_estimate() == "60g (+/-13g)"


def test_totals_carb_range_collapses():
    """Test equal low/high shows one value."""
    totals = AggregateTotals(total_carb_low=30, total_carb_high=30)
    assert totals.format_carb_range() == "30g"
    assert totals.format_carb_estimate() == "30g (+/-0g)"


def test_totals_to_dict():
    """Test AggregateTotals serialization."""
    totals = AggregateTotals(500, 50, 47, 72, 60, PEAK_SOURCE_REPORTED)
    assert totals.to_dict() == {
        "total_weight_g": 500,
        "total_volume_ml": 50,
        "total_carb_low": 47,
        "total_carb_high": 72,
        "peak_minutes": 60,
        "peak_source": "reported",
    }


# AbsorptionCurve tests
def test_curve_empty():
    """Test empty curve signal."""
    curve = AbsorptionCurve(NormalizedIngredient("A", 60, 0, 50))
    assert curve.is_empty
    assert curve.peak() is None


def test_curve_peak_and_pairs():
    """Test peak lookup and accessors."""
    ing = NormalizedIngredient("A", 60, 10, 50, color_index=1)
    curve = AbsorptionCurve(ing, [
        CurvePoint(0, 0.0), CurvePoint(30, 6.0), CurvePoint(60, 10.0), CurvePoint(90, 4.0),
    ])
    assert not curve.is_empty
    assert curve.peak() == CurvePoint(60, 10.0)
    assert curve.times == [0, 30, 60, 90]
    assert curve.impacts == [0.0, 6.0, 10.0, 4.0]
    assert curve.as_pairs()[2] == (60, 10.0)
    assert curve.color == "#4ECDC4"
    assert curve.name == "A"
    assert curve.glycemic_index == 50


def test_record_from_dict_non_finite():
    """Test NaN and infinite quantities load as 0."""
    rec = IngredientRecord.from_dict({
        "ingredient": "Rice",
        "estimated_weight_volume": float("inf"),
        "low_carb_estimate": "nan",
        "high_carb_estimate": 10,
        "gi_index": "-inf",
    })
    assert rec.amount == 0
    assert rec.carb_low == 0
    assert rec.carb_high == 10
    assert rec.glycemic_index == 0
    assert rec.carb_amount == 5


def test_record_non_finite_constructor():
    """Test non-finite values passed directly are replaced with 0."""
    rec = IngredientRecord("Rice", False, float("nan"), 0, float("inf"), 70, "45min")
    assert rec.amount == 0
    assert rec.carb_high == 0
    assert not rec.has_carbs
    assert rec.format_carb_range() == "0g"


def test_analysis_non_finite_peak():
    """Test an infinite or NaN aggregated peak is ignored."""
    for value in [float("inf"), float("nan"), "Infinity"]:
        analysis = AnalysisResult.from_dict({
            "ingredients": [],
            "aggregated_peak_bg_time_minutes": value,
        })
        assert analysis.aggregated_peak_minutes is None

    analysis = AnalysisResult.from_dict({"aggregated_peak_bg_time_minutes": "75"})
    assert analysis.aggregated_peak_minutes == 75
