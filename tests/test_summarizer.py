"""
Tests for meal totals.
"""
from carbie.data import get_sample
from carbie.glucose import summarize, weighted_peak_minutes
from carbie.models import IngredientRecord


def test_weight_and_volume_split():
    """Test solids sum to weight and liquids to volume."""
    records = [
        IngredientRecord("Rice", is_liquid=False, amount=200),
        IngredientRecord("Juice", is_liquid=True, amount=50),
    ]
    totals = summarize(records)
    assert totals.total_weight_grams == 200
    assert totals.total_volume_ml == 50


def test_zero_carb_counts_toward_weight():
    """Test zero-carb ingredients still add weight."""
    records = [
        IngredientRecord("Lamb", False, 150, 0, 0, 0, "0min"),
        IngredientRecord("Potato", False, 150, 25, 30, 80, "60min"),
    ]
    totals = summarize(records)
    assert totals.total_weight_grams == 300
    assert totals.total_carb_low == 25
    assert totals.total_carb_high == 30


def test_reported_peak_preferred():
    """Test the service's aggregate peak is used when present."""
    records = [IngredientRecord("Potato", carb_low=30, carb_high=40, peak_time_label="90min")]
    totals = summarize(records, reported_peak_minutes=60)
    assert totals.peak_minutes == 60
    assert totals.peak_source == "reported"


def test_weighted_peak_fallback():
    """Test the weighted average is used without a reported peak."""
    records = [IngredientRecord("Potato", carb_low=30, carb_high=40, peak_time_label="90min")]
    totals = summarize(records)
    assert totals.peak_minutes == 90
    assert totals.peak_source == "weighted"


def test_weighted_peak_minutes():
    """Test carb weighting and half-up rounding."""
    records = [
        IngredientRecord("A", carb_low=10, carb_high=10, peak_time_label="30min"),
        IngredientRecord("B", carb_low=30, carb_high=30, peak_time_label="1.5h"),
    ]
    # (30*10 + 90*30) / 40 = 75
    assert weighted_peak_minutes(records) == 75

    records = [
        IngredientRecord("A", carb_low=1, carb_high=1, peak_time_label="30min"),
        IngredientRecord("B", carb_low=1, carb_high=1, peak_time_label="31min"),
    ]
    assert weighted_peak_minutes(records) == 31


def test_weighted_peak_no_carbs():
    """Test zero total carbs gives 0."""
    records = [IngredientRecord("Lamb", carb_low=0, carb_high=0, peak_time_label="45min")]
    assert weighted_peak_minutes(records) == 0
    assert weighted_peak_minutes([]) == 0


def test_summarize_empty():
    """Test empty input gives zero totals."""
    totals = summarize([])
    assert totals.total_weight_grams == 0
    assert totals.total_volume_ml == 0
    assert totals.total_carb_low == 0
    assert totals.total_carb_high == 0
    assert totals.peak_minutes == 0


def test_summarize_sunday_roast():
    """Test totals and display strings for a bundled sample."""
    analysis = get_sample("test")
    totals = summarize(analysis.ingredients, analysis.aggregated_peak_minutes)
    assert totals.total_weight_grams == 500
    assert totals.total_volume_ml == 50
    assert totals.total_carb_low == 47
    assert totals.total_carb_high == 72
    assert totals.format_measure() == "500g + 50ml"
    assert totals.format_carb_range() == "47-72g"
    assert totals.format_carb_estimate() == "60g (+/-13g)"
    assert totals.format_peak_time() == "60min"


def test_summarize_sunday_roast_weighted():
    """Test the weighted peak for the same sample."""
    analysis = get_sample("test")
    # 4552.5 carb-minutes over 59.5 g
    assert weighted_peak_minutes(analysis.ingredients) == 77


def test_weighted_peak_overflow():
    """Test a non-finite weighted average gives 0."""
    records = [
        IngredientRecord("A", carb_low=1e308, carb_high=1e308, peak_time_label="30min"),
        IngredientRecord("B", carb_low=1e308, carb_high=1e308, peak_time_label="60min"),
    ]
    assert weighted_peak_minutes(records) == 0


def test_summarize_non_finite_record():
    """Test infinite carbs on a record do not break totals."""
    records = [
        IngredientRecord("Rice", False, 150, 0, float("inf"), 70, "45min"),
        IngredientRecord("Bread", False, 50, 20, 20, 75, "30min"),
    ]
    totals = summarize(records)
    assert totals.total_carb_high == 20
    assert totals.peak_minutes == 30
