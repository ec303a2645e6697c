"""Protocol for synchronous key-value blob storage."""

from typing import Protocol


class BlobStore(Protocol):
    """Interface for a key-value store holding JSON documents as text.

    Any backend (files on disk, an in-memory dict, a browser-like local
    storage bridge) implements this protocol to persist drilling progress.
    """

    def read(self, key: str) -> str | None:
        """Read the blob stored under a key.

        Args:
            key: Document key

        Returns:
            Stored text, or None if nothing is stored under the key.

        Raises:
            StorageError: If the backend fails to read.
        """
        ...

    def write(self, key: str, data: str) -> None:
        """Store a blob under a key, replacing any previous value.

        Args:
            key: Document key
            data: Text to store

        Raises:
            StorageError: If the backend fails to write.
        """
        ...
