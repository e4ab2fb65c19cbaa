"""Conversion of free text into Markdown and AsciiDoc safe representations."""

from __future__ import annotations

import re
from typing import Callable

from tfdocgen.settings import Settings

SegmentCallback = Callable[[str, bool, bool], str]

_WS = r"[\t\n\f\r ]"
_NOT_WS = r"[^\t\n\f\r ]"

_MULTILINE = re.compile(
    r"(" + _NOT_WS + r"*)(\r?\n)(" + _WS + r"*)([0-9A-Za-z_]+)"
)
_ASSIGNMENT = re.compile(_WS + r"*=" + _WS + r"*")

_URL_END = r"\w/\-+&~%=#$"
_URL_MID = _URL_END + r"*!(),.:;@\[\\\]^'"
_URL = re.compile(
    r"(?:[a-zA-Z][a-zA-Z.\-+]*://|mailto:)[" + _URL_MID + r"]*[" + _URL_END + r"]"
)

_MARKER = "‡‡‡DONTESCAPE‡‡‡".encode("utf-8")
_BYTES_WS = rb"[\t\n\f\r ]"


def sanitize_name(name: str, settings: Settings) -> str:
    """Escape underscores, which have a special meaning in Markdown."""
    if settings.escape_characters:
        name = name.replace("_", "\\_")
    return name


def sanitize_section(s: str, settings: Settings) -> str:
    """Make a header or footer suitable for a document, keeping line endings."""
    if s == "":
        return "n/a"

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, False)
        segment = convert_multiline_text(segment, False, True, settings.show_html)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        lastbreak = "" if segment.endswith("\n") else "\n"
        # An indented closing fence already sits on its own line.
        if segment.split("\n")[-1].strip() == "":
            lastbreak = ""
        return f"```{segment}{lastbreak}```"

    return process_segments(s, "```", normal, code)


def sanitize_document(s: str, settings: Settings) -> str:
    """Make text suitable for a Markdown or AsciiDoc document."""
    if s == "":
        return "n/a"

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, False)
        segment = convert_multiline_text(segment, False, False, settings.show_html)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        lastbreak = "" if segment.endswith("\n") else "\n"
        return f"```{segment}{lastbreak}```"

    return process_segments(s, "```", normal, code)


def sanitize_markdown_table(s: str, settings: Settings) -> str:
    """Make text suitable for a cell of a Markdown table."""
    if s == "":
        return "n/a"

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, True)
        segment = convert_multiline_text(segment, True, False, settings.show_html)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        linebreak, codestart, codeend = "<br>", "<pre>", "</pre>"
        segment = segment.strip()
        if not settings.show_html:
            linebreak = ""
            codestart = "```" if first else " ```"
            codeend = "```" if last else "``` "
            segment = convert_one_line_code_block(segment)
        segment = segment.replace("\n", linebreak).replace("\r", "")
        return f"{codestart}{segment}{codeend}"

    return process_segments(s, "```", normal, code)


def sanitize_asciidoc_table(s: str, settings: Settings) -> str:
    """Make text suitable for a cell of an AsciiDoc table."""
    if s == "":
        return "n/a"

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, True)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        return f"[source]\n----\n{segment.strip()}\n----"

    return process_segments(s, "```", normal, code)


def convert_multiline_text(
    s: str, is_table: bool, is_header: bool, show_html: bool
) -> str:
    """Convert multi-line text into its Markdown representation."""
    if is_table:
        s = s.strip()

    # A line break before a line starting with a word becomes the Markdown
    # space-space-newline; lists (lines starting with punctuation) stay as is.
    if not is_header:
        s = _MULTILINE.sub(r"\1  \2\3\4", s)
        s = s.replace("    \n", "  \n")
        s = s.replace("  \n\n", "\n\n")
        s = s.replace("\n  \n", "\n\n")

    if not is_table:
        return s

    linebreak = "<br>" if show_html else " "
    s = s.replace("  \n", linebreak)
    return s.replace("\n", linebreak)


def convert_one_line_code_block(s: str) -> str:
    """Join the non-blank lines of a code block with single spaces."""
    result = [
        _ASSIGNMENT.sub(" = ", segment).lstrip()
        for segment in s.split("\n")
        if segment.strip()
    ]
    return " ".join(result)


def _escape_char(line: str, char: str) -> str:
    """Escape ``char`` in one line, except where it marks emphasis."""
    char_bytes = char.encode("utf-8")
    escaped = re.escape(char_bytes)
    other = rb"[^\t\n\f\r " + escaped + rb"]"
    cases = (
        (
            re.compile(
                rb"^(" + _BYTES_WS + rb"*)(" + escaped + rb"+)(" + _BYTES_WS + rb"+)(.*)"
            ),
            (2,),
        ),
        (
            re.compile(
                rb"(" + _BYTES_WS + rb"+)(" + escaped + rb"+)(" + other + rb")(.*)("
                + other + rb")(" + escaped + rb"+)(" + _BYTES_WS + rb"+)"
            ),
            (6, 2),
        ),
    )
    data = line.encode("utf-8", errors="surrogateescape")
    for pattern, groups in cases:
        # Offsets refer to the line as it was before any replacement.
        for match in list(pattern.finditer(data)):
            for group in groups:
                start, end = match.span(group)
                protected = match.group(group).replace(char_bytes, _MARKER)
                data = data[:start] + protected + data[end:]
    data = data.replace(char_bytes, b"\\" + char_bytes)
    data = data.replace(_MARKER, char_bytes)
    return data.decode("utf-8", errors="surrogateescape")


def _wrap_inline_code(segment: str, first: bool, last: bool) -> str:
    return f"`{segment}`"


def escape_illegal_characters(s: str, settings: Settings, escape_pipe: bool) -> str:
    """Escape characters with a special meaning in Markdown, outside inline code."""
    if escape_pipe:
        s = process_segments(
            s,
            "`",
            lambda segment, first, last: segment.replace("|", "\\|"),
            _wrap_inline_code,
        )

    if settings.escape_characters:
        s = process_segments(
            s,
            "`",
            lambda segment, first, last: execute_per_line(
                segment, lambda line: _escape_char(line, "_")
            ),
            _wrap_inline_code,
        )
    return s


def normalize_urls(s: str, settings: Settings) -> str:
    """Undo escaping inside URLs."""
    if settings.escape_characters:
        for url in _URL.findall(s):
            s = s.replace(url, url.replace("\\", ""))
    return s


def process_segments(
    s: str, prefix: str, normal_fn: SegmentCallback, code_fn: SegmentCallback
) -> str:
    """Apply ``normal_fn`` outside and ``code_fn`` inside ``prefix``-delimited blocks.

    Both callbacks receive the segment and whether it is the first and the
    last non-blank piece around its neighbours.
    """
    in_code = s.startswith(prefix)
    segments = s.split(prefix)
    final = len(segments) - 1
    result: list[str] = []
    for index, segment in enumerate(segments):
        if not segment:
            continue
        first = index == 0 or not segments[index - 1].strip()
        last = index == final or not segments[index + 1].strip()
        callback = code_fn if in_code else normal_fn
        result.append(callback(segment, first, last))
        in_code = not in_code
    return "".join(result)


def execute_per_line(s: str, fn: Callable[[str], str]) -> str:
    """Apply ``fn`` to every line of ``s``."""
    return "\n".join(fn(line) for line in s.split("\n"))