"""
Bundled sample analyses for trying the app without the analysis service.
"""
from typing import Dict, Any, List, Optional

from carbie.models import AnalysisResult


SUNDAY_ROAST = {
    "model_name": "claude-haiku",
    "prompt": "test",
    "structured_data": {
        "is_food_related": True,
        "aggregated_peak_bg_time_minutes": 60,
        "ingredients": [
            {"ingredient": "Roast Potatoes", "is_liquid": False, "estimated_weight_volume": 200,
             "low_carb_estimate": 30, "high_carb_estimate": 40, "gi_index": 70, "peak_bg_time": "90min"},
            {"ingredient": "Roast Beef", "is_liquid": False, "estimated_weight_volume": 150,
             "low_carb_estimate": 0, "high_carb_estimate": 2, "gi_index": 0, "peak_bg_time": "45min"},
            {"ingredient": "Yorkshire Pudding", "is_liquid": False, "estimated_weight_volume": 50,
             "low_carb_estimate": 10, "high_carb_estimate": 15, "gi_index": 80, "peak_bg_time": "60min"},
            {"ingredient": "Roasted Vegetables", "is_liquid": False, "estimated_weight_volume": 100,
             "low_carb_estimate": 5, "high_carb_estimate": 10, "gi_index": 50, "peak_bg_time": "60min"},
            {"ingredient": "Gravy", "is_liquid": True, "estimated_weight_volume": 50,
             "low_carb_estimate": 2, "high_carb_estimate": 5, "gi_index": 20, "peak_bg_time": "45min"},
        ],
        "message": "Carb estimates for a typical Sunday roast dinner components",
    },
    "elapsed_time_seconds": 13.724469,
}

LAMB_ROAST_WITH_GLUCOSE = {
    "model_name": "claude-haiku",
    "prompt": ("sunday roast dinner, with lamb, pumpkin, potatoes, peas, mint jelly sauce "
               "and gravy and also 30 grams of glucose tablets"),
    "structured_data": {
        "is_food_related": True,
        "ingredients": [
            {"ingredient": "Lamb", "is_liquid": False, "estimated_weight_volume": 150,
             "low_carb_estimate": 0, "high_carb_estimate": 0, "gi_index": 0, "peak_bg_time": "0min"},
            {"ingredient": "Pumpkin", "is_liquid": False, "estimated_weight_volume": 100,
             "low_carb_estimate": 10, "high_carb_estimate": 15, "gi_index": 75, "peak_bg_time": "45min"},
            {"ingredient": "Potatoes", "is_liquid": False, "estimated_weight_volume": 150,
             "low_carb_estimate": 25, "high_carb_estimate": 30, "gi_index": 80, "peak_bg_time": "60min"},
            {"ingredient": "Peas", "is_liquid": False, "estimated_weight_volume": 50,
             "low_carb_estimate": 5, "high_carb_estimate": 8, "gi_index": 50, "peak_bg_time": "45min"},
            {"ingredient": "Mint Jelly Sauce", "is_liquid": True, "estimated_weight_volume": 30,
             "low_carb_estimate": 5, "high_carb_estimate": 10, "gi_index": 70, "peak_bg_time": "45min"},
            {"ingredient": "Gravy", "is_liquid": True, "estimated_weight_volume": 50,
             "low_carb_estimate": 2, "high_carb_estimate": 5, "gi_index": 40, "peak_bg_time": "30min"},
            {"ingredient": "Glucose Tablets", "is_liquid": False, "estimated_weight_volume": 30,
             "low_carb_estimate": 30, "high_carb_estimate": 30, "gi_index": 100, "peak_bg_time": "15min"},
        ],
        "aggregated_peak_bg_time_minutes": 60,
        "message": "Sunday roast carb breakdown",
    },
    "elapsed_time_seconds": 9.499581,
}

THREE_COURSE = {
    "model_name": "claude-haiku",
    "prompt": ("a 3 course meal with chicken soup, roast lamb pumpkin and potato main, "
               "and apple crumb with ice cream dessert"),
    "structured_data": {
        "is_food_related": True,
        "ingredients": [
            {"ingredient": "Chicken Soup", "is_liquid": True, "estimated_weight_volume": 250,
             "low_carb_estimate": 5, "high_carb_estimate": 10, "gi_index": 40, "peak_bg_time": "45min"},
            {"ingredient": "Roast Lamb", "is_liquid": False, "estimated_weight_volume": 150,
             "low_carb_estimate": 0, "high_carb_estimate": 2, "gi_index": 0, "peak_bg_time": "30min"},
            {"ingredient": "Pumpkin", "is_liquid": False, "estimated_weight_volume": 100,
             "low_carb_estimate": 10, "high_carb_estimate": 15, "gi_index": 75, "peak_bg_time": "60min"},
            {"ingredient": "Potato", "is_liquid": False, "estimated_weight_volume": 150,
             "low_carb_estimate": 20, "high_carb_estimate": 30, "gi_index": 80, "peak_bg_time": "75min"},
            {"ingredient": "Apple Crumb", "is_liquid": False, "estimated_weight_volume": 120,
             "low_carb_estimate": 25, "high_carb_estimate": 35, "gi_index": 70, "peak_bg_time": "90min"},
            {"ingredient": "Ice Cream", "is_liquid": True, "estimated_weight_volume": 100,
             "low_carb_estimate": 15, "high_carb_estimate": 25, "gi_index": 50, "peak_bg_time": "60min"},
        ],
        "aggregated_peak_bg_time_minutes": 75,
        "message": "Total carbs: 75-117g, peak BG around 75 minutes",
    },
    "elapsed_time_seconds": 9.264172,
}

SAMPLES: Dict[str, Dict[str, Any]] = {
    "test": SUNDAY_ROAST,
    "test2": LAMB_ROAST_WITH_GLUCOSE,
    "test3": THREE_COURSE,
}


def list_samples() -> List[str]:
    """Names of the bundled samples."""
    return sorted(SAMPLES)


def get_sample(name: str) -> Optional[AnalysisResult]:
    """
    Look up a bundled sample by name (case-insensitive).

    Returns:
        AnalysisResult, or None for an unknown name
    """
    data = SAMPLES.get(name.strip().lower())
    if data is None:
        return None
    return AnalysisResult.from_dict(data)
