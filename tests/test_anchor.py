import pytest

from tfdocgen.anchor import create_anchor_asciidoc, create_anchor_markdown
from tfdocgen.settings import Settings


@pytest.mark.parametrize(
    "name, anchor, escape, expected",
    [
        (
            "banana_anchor_escape",
            True,
            True,
            '<a name="module_banana_anchor_escape"></a> [banana\\_anchor\\_escape](#module\\_banana\\_anchor\\_escape)',
        ),
        (
            "banana_anchor_noescape",
            True,
            False,
            '<a name="module_banana_anchor_noescape"></a> [banana_anchor_noescape](#module_banana_anchor_noescape)',
        ),
        ("banana_anchor_escape", False, True, "banana\\_anchor\\_escape"),
        ("banana_anchor_noescape", False, False, "banana_anchor_noescape"),
    ],
)
def test_anchor_markdown(name, anchor, escape, expected):
    settings = Settings(show_anchor=anchor, escape_characters=escape)
    assert create_anchor_markdown("module", name, settings) == expected


@pytest.mark.parametrize(
    "name, anchor, escape, expected",
    [
        (
            "banana_anchor_escape",
            True,
            True,
            "[[module\\_banana\\_anchor\\_escape]] <<module\\_banana\\_anchor\\_escape,banana\\_anchor\\_escape>>",
        ),
        (
            "banana_anchor_noescape",
            True,
            False,
            "[[module_banana_anchor_noescape]] <<module_banana_anchor_noescape,banana_anchor_noescape>>",
        ),
        ("banana_anchor_escape", False, True, "banana\\_anchor\\_escape"),
        ("banana_anchor_noescape", False, False, "banana_anchor_noescape"),
    ],
)
def test_anchor_asciidoc(name, anchor, escape, expected):
    settings = Settings(show_anchor=anchor, escape_characters=escape)
    assert create_anchor_asciidoc("module", name, settings) == expected