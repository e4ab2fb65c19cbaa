import io

import pytest

from tfdocgen.lines import Lines

TEXT_EMPTY = ""

TEXT_ONE_LINE = "A single line of plain text"

TEXT_WITH_LEADING_COMMENT = """
/**
 * The storage module provisions a bucket
 * together with its access policy. Each
 * bucket gets a lifecycle rule that moves
 * old objects to cold storage, and
 * versioning can be switched on through
 * a single flag on the module call.
 * Logs are kept for ninety days.
 */

Alpha line one,
alpha line two,

# first marker comment
plain text after marker.
more plain text here

# second marker comment
some text below it
and another text line

# third marker comment
body text for the third
last body line here.

# fourth marker comment begins
# and continues on this line
closing plain line
"""

TEXT_WITHOUT_LEADING_COMMENT = """
Alpha line one,
alpha line two,

# first marker comment
plain text after marker.
more plain text here

# second marker comment
some text below it
and another text line

# third marker comment
body text for the third
last body line here.

# fourth marker comment begins
# and continues on this line
closing plain line
"""

LEADING_COMMENT = (
    "The storage module provisions a bucket together with its access policy. "
    "Each bucket gets a lifecycle rule that moves old objects to cold storage, "
    "and versioning can be switched on through a single flag on the module call. "
    "Logs are kept for ninety days."
)

_COMMENT_STARTS = ("#", "/*", "*")


def _condition(line):
    return line.strip().startswith(_COMMENT_STARTS)


def _parser(line):
    stripped = line.strip()
    if stripped.startswith(("/*", "*/")):
        return "", False
    if stripped == "*":
        return "", True
    text = stripped.removeprefix("* ").removeprefix("#")
    return text.strip(), True


def _lines(line_num, file_name=""):
    return Lines(
        condition=_condition, parser=_parser, file_name=file_name, line_num=line_num
    )


@pytest.fixture
def sample_files(tmp_path):
    (tmp_path / "sample.txt").write_text(TEXT_WITH_LEADING_COMMENT.strip() + "\n")
    (tmp_path / "no-trailing-line.txt").write_text(TEXT_WITH_LEADING_COMMENT.strip())
    return tmp_path


@pytest.mark.parametrize(
    "file_name, line_num, expected",
    [
        ("sample.txt", -1, LEADING_COMMENT),
        ("sample.txt", 15, "first marker comment"),
        ("no-trailing-line.txt", -1, LEADING_COMMENT),
    ],
)
def test_read_lines_from_file(sample_files, file_name, line_num, expected):
    lines = _lines(line_num, str(sample_files / file_name))
    assert " ".join(lines.extract()) == expected


def test_read_lines_from_missing_file(tmp_path):
    lines = _lines(-1, str(tmp_path / "missing.txt"))
    with pytest.raises(OSError):
        lines.extract()


@pytest.mark.parametrize(
    "text, line_num, expected",
    [
        (TEXT_WITH_LEADING_COMMENT, -1, LEADING_COMMENT),
        (TEXT_WITHOUT_LEADING_COMMENT, -1, ""),
        (TEXT_WITH_LEADING_COMMENT, 15, "first marker comment"),
        (TEXT_WITH_LEADING_COMMENT, 19, "second marker comment"),
        (TEXT_WITH_LEADING_COMMENT, 23, "third marker comment"),
        (
            TEXT_WITH_LEADING_COMMENT,
            28,
            "fourth marker comment begins and continues on this line",
        ),
    ],
)
def test_read_lines_from_text(text, line_num, expected):
    stream = io.StringIO(text.strip())
    assert " ".join(_lines(line_num).extract_from(stream)) == expected


@pytest.mark.parametrize(
    "text, line_num, message",
    [
        (TEXT_EMPTY, -1, "no lines in file"),
        (TEXT_ONE_LINE, 10, "only 1 line"),
        (TEXT_WITH_LEADING_COMMENT, 54, "only 28 lines"),
        (TEXT_EMPTY, 10, "no lines in file"),
    ],
)
def test_read_lines_from_text_errors(text, line_num, message):
    stream = io.StringIO(text.strip())
    with pytest.raises(ValueError) as excinfo:
        _lines(line_num).extract_from(stream)
    assert str(excinfo.value) == message