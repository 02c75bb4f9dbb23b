"""Review source backed by a local directory"""

import logging
from pathlib import Path

from reviewshelf.sources.base import ReviewSource, is_document_name


logger = logging.getLogger(__name__)


class DirectorySource(ReviewSource):
    def __init__(self, root):
        self.root = Path(root)

    def list_filenames(self) -> set[str]:
        try:
            return {p.name for p in self.root.iterdir() if p.is_file() and is_document_name(p.name)}
        except OSError as e:
            logger.warning("Cannot list %s: %s", self.root, e)
            return set()

    def fetch(self, filename: str) -> str | None:
        # Filenames are opaque identifiers within root, never paths.
        if not filename or Path(filename).name != filename:
            logger.warning("Rejected review filename %r", filename)
            return None
        path = self.root / filename
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", path, e)
            return None
