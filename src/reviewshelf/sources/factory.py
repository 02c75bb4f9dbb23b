"""Choose a review source implementation from a configured location"""

from reviewshelf.sources.base import ReviewSource
from reviewshelf.sources.local import DirectorySource
from reviewshelf.sources.remote import HttpSource


def open_source(location: str, timeout: float = 10.0) -> ReviewSource:
    """HttpSource for http(s) URLs, DirectorySource for everything else."""
    if location.startswith(('http://', 'https://')):
        return HttpSource(location, timeout=timeout)
    return DirectorySource(location)
