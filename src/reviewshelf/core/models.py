"""Data models shared by the list and detail views"""

from dataclasses import dataclass
from urllib.parse import quote

from pydantic import BaseModel, computed_field


@dataclass(frozen=True)
class SplitDocument:
    """A raw document cut at its front matter delimiters."""
    front_matter: str       # delimiter lines excluded; '' when absent
    body: str


class ReviewRecord(BaseModel):
    """One list-view entry; only built when title, date and permalink are all non-empty."""
    title: str
    date: str                       # textual, not necessarily ISO
    permalink: str
    source_filename: str

    @computed_field
    @property
    def url(self) -> str:
        return f"review.html?file={quote(self.source_filename, safe='')}"


class ReviewPage(BaseModel):
    """Detail-view content for a single review. Empty title/date are allowed."""
    filename: str
    title: str = ""
    date: str = ""
    author: str = ""
    publication_year: str = ""
    meta_line: str = ""
    html: str = ""
