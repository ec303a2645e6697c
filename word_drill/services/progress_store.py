"""Persistence of the catalog and learning state as JSON documents."""

import json
import logging
from dataclasses import dataclass, field

from word_drill.exceptions import StateDecodeError, StorageError
from word_drill.interfaces import BlobStore
from word_drill.models import LearningStats, LearningWord, ViewMode, WordRecord

logger = logging.getLogger(__name__)


@dataclass
class SavedState:
    """Learning state as read back from storage."""

    queue: list[LearningWord] = field(default_factory=list)
    current_index: int = 0
    stats: LearningStats = field(default_factory=LearningStats)
    view_mode: ViewMode = ViewMode.V1


class ProgressStore:
    """Reads and writes the two drilling documents through a blob store.

    The catalog and the learning state are kept under separate keys so a
    new catalog can be saved without touching progress and vice versa.
    Reads never raise: a missing, unreadable or malformed document reads
    as "nothing saved". Writes raise StorageError and leave the decision
    to the caller.
    """

    def __init__(self, blob_store: BlobStore, catalog_key: str, state_key: str):
        """Initialize the progress store.

        Args:
            blob_store: Backend holding the documents
            catalog_key: Key of the catalog document
            state_key: Key of the learning-state document
        """
        self.blob_store = blob_store
        self.catalog_key = catalog_key
        self.state_key = state_key

    def save_catalog(self, catalog: list[WordRecord]) -> None:
        """Write the catalog document.

        Raises:
            StorageError: If the backend write fails
        """
        payload = json.dumps([record.to_dict() for record in catalog], ensure_ascii=False)
        self.blob_store.write(self.catalog_key, payload)

    def save_state(
        self,
        queue: list[LearningWord],
        current_index: int,
        stats: LearningStats,
        view_mode: ViewMode,
    ) -> None:
        """Write the learning-state document.

        Raises:
            StorageError: If the backend write fails
        """
        payload = json.dumps(
            {
                "queue": [word.to_dict() for word in queue],
                "currentIndex": current_index,
                "stats": stats.to_dict(),
                "viewMode": view_mode.value,
            },
            ensure_ascii=False,
        )
        self.blob_store.write(self.state_key, payload)

    def load_catalog(self) -> list[WordRecord]:
        """Read the catalog document.

        Returns:
            Stored records, or an empty list if none can be read
        """
        try:
            raw = self.blob_store.read(self.catalog_key)
        except StorageError as e:
            logger.warning(f"Could not read saved catalog: {e}")
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError("catalog document must be an array")
            return [WordRecord.from_dict(entry) for entry in data]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring malformed saved catalog: {e}")
            return []

    def load_state(self) -> SavedState | None:
        """Read the learning-state document.

        Returns:
            Decoded state, or None if nothing usable is stored
        """
        try:
            raw = self.blob_store.read(self.state_key)
        except StorageError as e:
            logger.warning(f"Could not read saved learning state: {e}")
            return None
        if raw is None:
            return None

        try:
            return self.decode_state(raw)
        except StateDecodeError as e:
            logger.warning(f"Ignoring malformed learning state: {e}")
            return None

    @staticmethod
    def decode_state(raw: str) -> SavedState:
        """Decode learning-state text.

        Raises:
            StateDecodeError: If the document is not a valid learning state
        """
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError("state document must be an object")
            return SavedState(
                queue=[LearningWord.from_dict(entry) for entry in data.get("queue", [])],
                current_index=int(data.get("currentIndex", 0)),
                stats=LearningStats.from_dict(data.get("stats", {})),
                view_mode=ViewMode(data.get("viewMode", ViewMode.V1.value)),
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise StateDecodeError(str(e)) from e
