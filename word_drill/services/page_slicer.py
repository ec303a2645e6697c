"""Splits a catalog into fixed-size pages."""

from word_drill.models import LearningStats, WordRecord


class PageSlicer:
    """Maps page numbers to contiguous slices of the catalog."""

    def __init__(self, words_per_page: int):
        """Initialize the slicer.

        Args:
            words_per_page: Maximum number of words on a page (positive)
        """
        if words_per_page < 1:
            raise ValueError(f"words_per_page must be positive, got {words_per_page}")
        self.words_per_page = words_per_page

    def total_pages(self, catalog: list[WordRecord]) -> int:
        """Number of pages for the catalog (0 for an empty catalog)."""
        return LearningStats.count_pages(len(catalog), self.words_per_page)

    def page_start(self, page: int) -> int:
        """Catalog offset of the first word on a page."""
        return page * self.words_per_page

    def slice_page(self, catalog: list[WordRecord], page: int) -> list[tuple[int, WordRecord]]:
        """Records on a page, each paired with its catalog offset.

        Pages past the end of the catalog are empty.
        """
        if page < 0:
            return []
        start = self.page_start(page)
        end = min(start + self.words_per_page, len(catalog))
        return [(offset, catalog[offset]) for offset in range(start, end)]
