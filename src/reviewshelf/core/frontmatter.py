"""Front matter splitting and permissive key: value metadata parsing"""

from reviewshelf.core.models import SplitDocument


DELIMITER = '---'
QUOTES = ('"', "'")


def _is_delimiter(line: str) -> bool:
    return line.rstrip('\r') == DELIMITER


def split_front_matter(text: str) -> SplitDocument:
    """Split text into (front_matter, body); no opening delimiter on line 1 means no front matter."""
    lines = text.split('\n')
    if not lines or not _is_delimiter(lines[0]):
        return SplitDocument(front_matter='', body=text)

    end_idx = None
    for i in range(1, len(lines)):
        if _is_delimiter(lines[i]):
            end_idx = i
            break
    if end_idx is None:
        return SplitDocument(front_matter='', body=text)

    return SplitDocument(
        front_matter='\n'.join(lines[1:end_idx]),
        body='\n'.join(lines[end_idx + 1:]),
    )


def join_front_matter(front_matter: str, body: str) -> str:
    """Inverse of split_front_matter for well-formed input."""
    return f"{DELIMITER}\n{front_matter}\n{DELIMITER}\n{body}"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_front_matter(block: str) -> dict[str, str]:
    """Parse `key: value` lines; colon-less lines and empty keys are skipped, last duplicate wins."""
    metadata: dict[str, str] = {}
    if not block:
        return metadata
    for line in block.split('\n'):
        key, sep, raw_value = line.partition(':')
        if not sep:
            continue
        key = key.strip()
        if not key:
            continue
        metadata[key] = _unquote(raw_value.strip())
    return metadata


def read_metadata(text: str) -> dict[str, str]:
    """Metadata of a raw document, or {} when it has no front matter."""
    return parse_front_matter(split_front_matter(text).front_matter)
