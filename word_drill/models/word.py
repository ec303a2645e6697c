"""Data models for vocabulary words."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WordState(Enum):
    """Lifecycle state of a word in the learning queue."""

    LEARNING = "learning"
    CONSOLIDATING = "consolidating"
    LEARNED = "learned"


@dataclass(frozen=True)
class WordRecord:
    """A user-supplied vocabulary entry. Never mutated after load."""

    headword: str
    part_of_speech: str  # "PoS" in catalog files
    phonetic: str  # "IPA" in catalog files
    definitions: tuple[str, ...] = ()
    examples: tuple[str, ...] = ()

    def __post_init__(self):
        """Freeze list inputs into tuples."""
        if not isinstance(self.definitions, tuple):
            object.__setattr__(self, "definitions", tuple(self.definitions))
        if not isinstance(self.examples, tuple):
            object.__setattr__(self, "examples", tuple(self.examples))

    @property
    def match_key(self) -> tuple[str, str]:
        """Key used to pair catalog entries with live queue words."""
        return (self.headword, self.part_of_speech)

    def to_dict(self) -> dict[str, Any]:
        """Encode using the catalog file field names."""
        return {
            "headword": self.headword,
            "PoS": self.part_of_speech,
            "IPA": self.phonetic,
            "definitions": list(self.definitions),
            "examples": list(self.examples),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WordRecord":
        """Decode a record written by to_dict (no validation)."""
        return cls(
            headword=data["headword"],
            part_of_speech=data["PoS"],
            phonetic=data["IPA"],
            definitions=tuple(data.get("definitions", ())),
            examples=tuple(data.get("examples", ())),
        )

    def __str__(self) -> str:
        return f"{self.headword} ({self.part_of_speech})"


@dataclass
class LearningWord:
    """A catalog word with per-word mastery counters, as held in the queue."""

    record: WordRecord
    id: str
    miss_count: int = 0
    correct_after_miss: int = 0
    state: WordState = field(default=WordState.LEARNING)

    @property
    def headword(self) -> str:
        return self.record.headword

    @property
    def part_of_speech(self) -> str:
        return self.record.part_of_speech

    @property
    def phonetic(self) -> str:
        return self.record.phonetic

    @property
    def definitions(self) -> tuple[str, ...]:
        return self.record.definitions

    @property
    def examples(self) -> tuple[str, ...]:
        return self.record.examples

    @property
    def is_consolidating(self) -> bool:
        """Check if the word has been missed and still needs confirmation."""
        return self.state == WordState.CONSOLIDATING

    def to_dict(self) -> dict[str, Any]:
        """Encode as a flat document: record fields plus counters."""
        data = self.record.to_dict()
        data.update(
            {
                "id": self.id,
                "missCount": self.miss_count,
                "correctAfterMiss": self.correct_after_miss,
                "state": self.state.value,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LearningWord":
        """Decode a document written by to_dict.

        Raises:
            KeyError: If a required field is missing
            ValueError: If the state value is unknown
        """
        return cls(
            record=WordRecord.from_dict(data),
            id=str(data["id"]),
            miss_count=int(data.get("missCount", 0)),
            correct_after_miss=int(data.get("correctAfterMiss", 0)),
            state=WordState(data.get("state", WordState.LEARNING.value)),
        )

    def __str__(self) -> str:
        return f"{self.headword} [{self.miss_count}/{self.correct_after_miss}]"

    def __repr__(self) -> str:
        return (
            f"LearningWord(id='{self.id}', miss_count={self.miss_count}, "
            f"correct_after_miss={self.correct_after_miss}, state={self.state.value})"
        )
