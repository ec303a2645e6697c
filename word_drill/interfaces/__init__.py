"""Interface protocols for Word Drill."""

from .blob_store import BlobStore
from .presenter import PresenterProtocol

__all__ = ["BlobStore", "PresenterProtocol"]
