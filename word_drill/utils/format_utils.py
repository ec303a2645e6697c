"""Text rendering helpers for learning words."""

from word_drill.models import LearningWord, ViewMode

MARK = "■"


def format_miss_marks(miss_count: int) -> str:
    """One mark per miss, e.g. 3 -> "■■■"."""
    return MARK * max(miss_count, 0)


def format_correct_marks(correct_after_miss: int, group_size: int = 3) -> str:
    """Correct answers after a miss as space-separated groups of marks.

    Example:
        format_correct_marks(7) -> "■■■ ■■■ ■"
    """
    if correct_after_miss <= 0:
        return ""
    full_groups, remainder = divmod(correct_after_miss, group_size)
    groups = [MARK * group_size] * full_groups
    if remainder:
        groups.append(MARK * remainder)
    return " ".join(groups)


def format_word_line(word: LearningWord, mode: ViewMode) -> str:
    """Single-line summary of a word for list views.

    V1 shows the counters as numbers, V2 and V3 as marks, V4 shows the
    bare word.
    """
    line = f"{word.headword} [{word.part_of_speech}] {word.phonetic}"
    if mode == ViewMode.V4:
        return line

    if mode == ViewMode.V1:
        counters = []
        if word.miss_count > 0:
            counters.append(f"missed {word.miss_count}")
        if word.correct_after_miss > 0:
            counters.append(f"correct {word.correct_after_miss}")
        return f"{line} ({', '.join(counters)})" if counters else line

    marks = " ".join(
        part
        for part in (
            format_miss_marks(word.miss_count),
            format_correct_marks(word.correct_after_miss),
        )
        if part
    )
    return f"{line}  {marks}" if marks else line
