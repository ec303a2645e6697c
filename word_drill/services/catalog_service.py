"""Service for reading and validating word catalog files."""

import json
import logging
from pathlib import Path
from typing import Any

from word_drill.exceptions import CatalogParseError, CatalogValidationError
from word_drill.models import WordRecord

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".txt")

REQUIRED_TEXT_FIELDS = ("headword", "PoS", "IPA")
REQUIRED_LIST_FIELDS = ("definitions", "examples")


class CatalogService:
    """Turns catalog files into validated WordRecord lists.

    A catalog is JSON: either an array of word objects or an object
    with a "words" array. A single malformed entry rejects the whole
    catalog, so the engine only ever sees well-formed records.
    """

    def load_file(self, path: Path) -> list[WordRecord]:
        """Read, parse and validate a catalog file.

        Args:
            path: Path to a .json or .txt file

        Returns:
            Validated word records in file order

        Raises:
            CatalogParseError: If the file is missing, unreadable or not JSON
            CatalogValidationError: If any entry is malformed
        """
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise CatalogParseError(f"Unsupported catalog file type: {path.name} (use .json or .txt)")

        if not path.exists():
            raise CatalogParseError(f"Catalog file not found: {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogParseError(f"Error reading catalog file {path}: {e}") from e

        records = self.parse_text(text)
        logger.info(f"Loaded {len(records)} words from {path.name}")
        return records

    def parse_text(self, text: str) -> list[WordRecord]:
        """Parse and validate catalog JSON text.

        Raises:
            CatalogParseError: If the text is not JSON or has the wrong shape
            CatalogValidationError: If any entry is malformed
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogParseError(f"Failed to parse file: {e}") from e

        if isinstance(data, list):
            entries = data
        elif isinstance(data, dict) and isinstance(data.get("words"), list):
            entries = data["words"]
        else:
            raise CatalogParseError(
                'Invalid JSON format. Expected an array of words or an object with a "words" property.'
            )

        return self.validate(entries)

    def validate(self, entries: list[Any]) -> list[WordRecord]:
        """Validate decoded entries and convert them to records.

        Raises:
            CatalogValidationError: On the first malformed entry
        """
        if not entries:
            raise CatalogValidationError("File must contain at least one word")

        records = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise CatalogValidationError(f"Word at index {i} is not an object")
            for name in REQUIRED_TEXT_FIELDS:
                value = entry.get(name)
                if not value or not isinstance(value, str):
                    raise CatalogValidationError(
                        f'Word at index {i} is missing required field "{name}"'
                    )
            for name in REQUIRED_LIST_FIELDS:
                if not isinstance(entry.get(name), list):
                    raise CatalogValidationError(
                        f'Word at index {i} has invalid "{name}" field (must be an array)'
                    )
            records.append(WordRecord.from_dict(entry))
        return records
