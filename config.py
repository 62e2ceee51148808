"""
Configuration for the Carbie carb analysis app.

Toggle between PRODUCTION and DEVELOPMENT mode.
"""
import os
from pathlib import Path

# ==================== MODE SELECTION ====================
# Override with the CARBIE_MODE environment variable
MODE = os.getenv("CARBIE_MODE", "DEVELOPMENT").upper()  # "PRODUCTION" or "DEVELOPMENT"
# ========================================================

# Base paths
PROJECT_ROOT = Path(__file__).parent
PRODUCTION_DATA_PATH = Path(os.getenv("CARBIE_DATA_PATH", str(Path.home() / ".carbie")))
DEVELOPMENT_DATA_PATH = PROJECT_ROOT / "data"

# Select data path based on mode
if MODE == "PRODUCTION":
    DATA_PATH = PRODUCTION_DATA_PATH
elif MODE == "DEVELOPMENT":
    DATA_PATH = DEVELOPMENT_DATA_PATH
else:
    raise ValueError(f"Invalid MODE: {MODE}. Must be 'PRODUCTION' or 'DEVELOPMENT'")

# File paths
ANALYSIS_FILE = DATA_PATH / "analysis.json"
CHART_OUTPUT_FILE = DATA_PATH / "carb_absorption.jpg"
CURVES_EXPORT_FILE = DATA_PATH / "carb_curves.csv"


def verify_data_files():
    """Check that the data directory exists."""
    if not DATA_PATH.is_dir():
        raise FileNotFoundError(
            f"Missing data directory in {MODE} mode:\n  - {DATA_PATH}"
        )
    return True


# Curve settings
NUM_SAMPLES = 100  # intervals per absorption curve

# Logging
LOG_LEVEL = os.getenv("CARBIE_LOG_LEVEL", "DEBUG" if MODE == "DEVELOPMENT" else "WARNING")

if __name__ == "__main__":
    print(f"\nMode: {MODE}")
    print(f"Data Path: {DATA_PATH}")
    print(f"Analysis File: {ANALYSIS_FILE}")
    print(f"Chart File: {CHART_OUTPUT_FILE}")
    print(f"Export File: {CURVES_EXPORT_FILE}")
    print(f"\nData path exists: {verify_data_files()}")
