"""JSON storage for upload reports."""

import json
import os
from typing import Dict


class JSONStorage:
    """Save and load upload reports as JSON."""

    @staticmethod
    def save(report: Dict, filepath: str):
        """
        Save a report to a JSON file.

        Args:
            report: The report data (e.g. CommitResult.to_dict())
            filepath: Path to save the file
        """
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        print(f"✓ Saved upload report to {filepath}")

    @staticmethod
    def load(filepath: str) -> Dict:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
