"""Pytest configuration and shared fixtures."""

import pytest

from word_drill.config import DrillConfig
from word_drill.engine import LearningEngine
from word_drill.exceptions import StorageError
from word_drill.models import LearningWord, WordRecord, WordState
from word_drill.presenters import NullPresenter
from word_drill.services import MemoryBlobStore


@pytest.fixture
def test_config(tmp_path):
    """Provide a configuration with default thresholds and a temporary data folder."""
    return DrillConfig(data_dir=tmp_path / "data")


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def memory_store():
    """Provide an empty in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def make_record():
    """Factory fixture for creating WordRecord instances with sensible defaults."""

    def _make(
        headword="hello",
        part_of_speech="interjection",
        phonetic="[həˈloʊ]",
        definitions=("привет",),
        examples=("Hello, how are you?",),
    ):
        return WordRecord(
            headword=headword,
            part_of_speech=part_of_speech,
            phonetic=phonetic,
            definitions=definitions,
            examples=examples,
        )

    return _make


@pytest.fixture
def make_catalog(make_record):
    """Factory fixture for a catalog of distinct words named word0, word1, ..."""

    def _make(size):
        return [make_record(headword=f"word{i}", part_of_speech="noun") for i in range(size)]

    return _make


@pytest.fixture
def make_learning_word(make_record):
    """Factory fixture for learning words with explicit counters."""

    def _make(headword="hello", offset=0, miss_count=0, correct_after_miss=0, **kwargs):
        state = WordState.CONSOLIDATING if miss_count > 0 else WordState.LEARNING
        return LearningWord(
            record=make_record(headword=headword, **kwargs),
            id=f"{headword}-{offset}",
            miss_count=miss_count,
            correct_after_miss=correct_after_miss,
            state=state,
        )

    return _make


@pytest.fixture
def make_engine(make_catalog, test_config):
    """Factory fixture for engines over a generated catalog."""

    def _make(size=5, config=None, store=None, presenter=None):
        return LearningEngine(
            make_catalog(size),
            config=config or test_config,
            store=store,
            presenter=presenter,
        )

    return _make


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.words = []
        self.stats = []
        self.views = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_word(self, word, translation_visible) -> None:
        self.words.append((word.headword, translation_visible))

    def show_stats(self, stats) -> None:
        self.stats.append(stats)

    def show_view(self, words, mode) -> None:
        self.views.append(([w.headword for w in words], mode))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class FailingBlobStore:
    """Blob store whose reads and/or writes always fail."""

    def __init__(self, fail_reads=True, fail_writes=True, initial=None):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self._inner = MemoryBlobStore(initial)

    def read(self, key):
        if self.fail_reads:
            raise StorageError("disk unavailable")
        return self._inner.read(key)

    def write(self, key, data):
        if self.fail_writes:
            raise StorageError("disk full")
        self._inner.write(key, data)


@pytest.fixture
def failing_store():
    """Provide a blob store that fails every read and write."""
    return FailingBlobStore()
