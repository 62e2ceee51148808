"""
Tests for analysis loading and bundled samples.
"""
import json

from carbie.data import AnalysisLoader, get_sample, list_samples
from carbie.models import AnalysisResult, IngredientRecord


def test_load_full_result(tmp_path):
    """Test loading the service's full response."""
    path = tmp_path / "analysis.json"
    path.write_text(json.dumps({
        "model_name": "m",
        "structured_data": {
            "is_food_related": True,
            "ingredients": [{"ingredient": "Rice", "low_carb_estimate": 40,
                             "high_carb_estimate": 45, "peak_bg_time": "60min"}],
            "aggregated_peak_bg_time_minutes": 60,
            "message": "Rice bowl",
        },
    }), encoding="utf-8")

    analysis = AnalysisLoader(path).load()
    assert analysis is not None
    assert analysis.ingredients[0].name == "Rice"
    assert analysis.aggregated_peak_minutes == 60
    assert analysis.message == "Rice bowl"


def test_load_structured_data_only(tmp_path):
    """Test loading bare structured data from an explicit path."""
    path = tmp_path / "bare.json"
    path.write_text(json.dumps({"ingredients": [{"ingredient": "Milk", "is_liquid": True}]}),
                    encoding="utf-8")

    analysis = AnalysisLoader(tmp_path / "other.json").load(path)
    assert analysis.ingredients[0].is_liquid is True


def test_load_missing_file(tmp_path):
    """Test a missing file loads as None."""
    assert AnalysisLoader(tmp_path / "nope.json").load() is None


def test_load_corrupt_file(tmp_path):
    """Test invalid JSON loads as None."""
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    assert AnalysisLoader(path).load() is None


def test_load_non_object(tmp_path):
    """Test a JSON list loads as None."""
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert AnalysisLoader(path).load() is None


def test_save_then_load(tmp_path):
    """Test saved analyses load back unchanged."""
    path = tmp_path / "saved.json"
    analysis = AnalysisResult(
        ingredients=[IngredientRecord("Juice", True, 250, 25, 30, 50, "30min")],
        aggregated_peak_minutes=30,
        message="Juice",
    )
    loader = AnalysisLoader(path)
    assert loader.save(analysis) == path
    assert loader.load() == analysis


def test_list_samples():
    """Test bundled sample names."""
    assert list_samples() == ["test", "test2", "test3"]


def test_get_sample():
    """Test sample lookup is case-insensitive."""
    analysis = get_sample(" TEST3 ")
    assert analysis is not None
    assert len(analysis.ingredients) == 6
    assert analysis.aggregated_peak_minutes == 75
    assert get_sample("missing") is None


def test_load_non_finite_values(tmp_path):
    """Test Infinity and NaN literals load with safe values."""
    path = tmp_path / "inf.json"
    path.write_text(
        '{"aggregated_peak_bg_time_minutes": Infinity, "ingredients": ['
        '{"ingredient": "Rice", "low_carb_estimate": NaN, "high_carb_estimate": Infinity}]}',
        encoding="utf-8",
    )
    analysis = AnalysisLoader(path).load()
    assert analysis is not None
    assert analysis.aggregated_peak_minutes is None
    assert analysis.ingredients[0].carb_low == 0
    assert analysis.ingredients[0].carb_high == 0
