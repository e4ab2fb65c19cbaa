"""Anchored names for Markdown and AsciiDoc documents."""

from __future__ import annotations

from tfdocgen.sanitizer import sanitize_name
from tfdocgen.settings import Settings


def create_anchor_markdown(t: str, s: str, settings: Settings) -> str:
    """Return the name ``s`` of section type ``t``, with an HTML anchor if enabled."""
    sanitized_name = sanitize_name(s, settings)
    if settings.show_anchor:
        anchor_name = f"{t}_{s}"
        sanitized_anchor_name = sanitize_name(anchor_name, settings)
        # The <a> name is left unescaped: escaping it breaks Markdown rendering.
        return (
            f'<a name="{anchor_name}"></a> '
            f"[{sanitized_name}](#{sanitized_anchor_name})"
        )
    return sanitized_name


def create_anchor_asciidoc(t: str, s: str, settings: Settings) -> str:
    """Return the name ``s`` of section type ``t``, with an AsciiDoc anchor if enabled."""
    sanitized_name = sanitize_name(s, settings)
    if settings.show_anchor:
        sanitized_anchor_name = sanitize_name(f"{t}_{s}", settings)
        return (
            f"[[{sanitized_anchor_name}]] "
            f"<<{sanitized_anchor_name},{sanitized_name}>>"
        )
    return sanitized_name