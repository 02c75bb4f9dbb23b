"""Review source protocol: list candidate filenames and fetch raw document text"""

from abc import ABC, abstractmethod


DOC_SUFFIX = '.md'


class ReviewSource(ABC):
    """Transport for review documents. Implementations never raise on transport failure."""

    @abstractmethod
    def list_filenames(self) -> set[str]:
        """Return deduplicated filenames ending in .md; empty set when listing fails."""
        raise NotImplementedError

    @abstractmethod
    def fetch(self, filename: str) -> str | None:
        """Return the raw text of filename, or None when it is unavailable."""
        raise NotImplementedError


def is_document_name(name: str) -> bool:
    return name.lower().endswith(DOC_SUFFIX)
