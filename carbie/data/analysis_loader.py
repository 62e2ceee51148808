"""
Analysis file loader.

Reads meal analysis results saved as JSON, either the service's full
response ({"structured_data": {...}}) or just the structured data.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from carbie.models import AnalysisResult

logger = logging.getLogger(__name__)


class AnalysisLoader:
    """
    Loads and saves analysis JSON files.

    Missing or corrupt files load as None rather than raising.
    """

    def __init__(self, filepath: Path):
        """
        Initialize loader.

        Args:
            filepath: Default analysis JSON file
        """
        self.filepath = Path(filepath)

    def load(self, filepath: Optional[Path] = None) -> Optional[AnalysisResult]:
        """
        Load an analysis from disk.

        Args:
            filepath: File to read (defaults to the loader's file)

        Returns:
            AnalysisResult, or None if the file is missing or unreadable
        """
        path = Path(filepath) if filepath is not None else self.filepath
        if not path.exists():
            logger.warning("Analysis file not found: %s", path)
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read analysis file %s: %s", path, e)
            return None

        if not isinstance(raw, dict):
            logger.warning("Analysis file %s does not contain a JSON object", path)
            return None

        return AnalysisResult.from_dict(raw)

    def save(self, analysis: AnalysisResult, filepath: Optional[Path] = None) -> Path:
        """
        Save an analysis to disk in the full response format.

        Returns:
            Path written
        """
        path = Path(filepath) if filepath is not None else self.filepath
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(analysis.to_dict(), f, indent=2, ensure_ascii=False)
        return path
