"""Shared setup for CLI commands."""

from pathlib import Path

from word_drill.config import ConfigManager, DrillConfig
from word_drill.engine import LearningEngine
from word_drill.interfaces import PresenterProtocol
from word_drill.services import create_blob_store


def load_config(args) -> DrillConfig:
    """Load the config for the data folder given on the command line."""
    if args.data_dir is None:
        return ConfigManager().load_config()
    data_dir = Path(args.data_dir)
    return ConfigManager(data_dir / "config.json").load_config(data_dir=data_dir)


def open_engine(args, presenter: PresenterProtocol) -> LearningEngine:
    """Restore the engine from the data folder.

    Raises:
        StorageError: If the configured storage backend cannot be opened
    """
    config = load_config(args)
    store = create_blob_store(config.storage_backend, config.data_dir)
    return LearningEngine.restore(store, config=config, presenter=presenter)
