"""Business logic services for Word Drill."""

from .blob_stores import JsonFileBlobStore, MemoryBlobStore, SqliteBlobStore, create_blob_store
from .catalog_service import CatalogService
from .history_log import HistoryLog
from .mastery_tracker import MasteryTracker
from .page_slicer import PageSlicer
from .progress_store import ProgressStore, SavedState
from .view_projector import ViewProjector

__all__ = [
    "CatalogService",
    "PageSlicer",
    "MasteryTracker",
    "HistoryLog",
    "ViewProjector",
    "ProgressStore",
    "SavedState",
    "JsonFileBlobStore",
    "MemoryBlobStore",
    "SqliteBlobStore",
    "create_blob_store",
]
