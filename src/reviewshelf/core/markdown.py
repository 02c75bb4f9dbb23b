"""Line-oriented markdown to HTML conversion for review bodies

Supports headings, flat unordered lists, fenced code, single-line blockquotes
and paragraphs, plus bold/italic/inline-code emphasis. Anything else renders
as a paragraph of escaped text.
"""

import re


FENCE = '```'
HEADING_RE = re.compile(r'^(#{1,6})\s+(.*)$')
LIST_ITEM_RE = re.compile(r'^[-*+]\s+(.*)$')
QUOTE_PREFIX_RE = re.compile(r'^>\s?')

# Applied in order; each pattern is non-greedy and never nests.
INLINE_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r'\*\*(.+?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'__(.+?)__'),     r'<strong>\1</strong>'),
    (re.compile(r'\*(.+?)\*'),     r'<em>\1</em>'),
    (re.compile(r'_(.+?)_'),       r'<em>\1</em>'),
    (re.compile(r'`([^`]+)`'),     r'<code>\1</code>'),
]


def escape_html(text: str) -> str:
    """Escape &, < and > (ampersand first)."""
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def inline_markdown(text: str) -> str:
    """Escape text, then substitute emphasis and inline code markup."""
    result = escape_html(text)
    for pattern, repl in INLINE_RULES:
        result = pattern.sub(repl, result)
    return result


class _Renderer:
    """Single-pass state machine over body lines."""

    def __init__(self) -> None:
        self.html: list[str] = []
        self.in_code = False
        self.code_lines: list[str] = []
        self.list_items: list[str] = []

    def flush_code(self) -> None:
        if not self.in_code:
            return
        code = escape_html('\n'.join(self.code_lines))
        self.html.append(f"<pre><code>{code}</code></pre>")
        self.in_code = False
        self.code_lines = []

    def flush_list(self) -> None:
        if not self.list_items:
            return
        items = ''.join(f"<li>{item}</li>" for item in self.list_items)
        self.html.append(f"<ul>{items}</ul>")
        self.list_items = []

    def feed(self, raw_line: str) -> None:
        line = raw_line[:-1] if raw_line.endswith('\r') else raw_line

        if line.startswith(FENCE):
            if self.in_code:
                self.flush_code()
            else:
                self.in_code = True
            return

        if self.in_code:
            self.code_lines.append(line)
            return

        m = HEADING_RE.match(line)
        if m:
            self.flush_list()
            level = len(m.group(1))
            self.html.append(f"<h{level}>{inline_markdown(m.group(2))}</h{level}>")
            return

        m = LIST_ITEM_RE.match(line)
        if m:
            self.list_items.append(inline_markdown(m.group(1)))
            return
        self.flush_list()

        if not line.strip():
            return

        if line.startswith('>'):
            text = QUOTE_PREFIX_RE.sub('', line, count=1)
            self.html.append(f"<blockquote>{inline_markdown(text)}</blockquote>")
            return

        self.html.append(f"<p>{inline_markdown(line)}</p>")

    def finish(self) -> str:
        self.flush_list()
        self.flush_code()
        return '\n'.join(self.html)


def render_markdown(body: str) -> str:
    """Convert a review body to HTML; unclosed code fences are still emitted."""
    renderer = _Renderer()
    for line in body.split('\n'):
        renderer.feed(line)
    return renderer.finish()
