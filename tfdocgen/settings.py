"""Settings that control which sections are printed and how."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class Settings:
    """All printing settings, with their default values."""

    # Escape special characters (such as _ * in Markdown). Scope: Markdown.
    escape_characters: bool = True
    # Hide empty sections. Scope: Asciidoc, Markdown.
    hide_empty: bool = False
    # Indentation level of headers (1 to 5). Scope: Asciidoc, Markdown.
    indent_level: int = 2
    # Extract and show output values from the module output. Scope: global.
    output_values: bool = False
    # Show HTML anchors. Scope: Asciidoc, Markdown.
    show_anchor: bool = True
    # Print a colourised result in the terminal. Scope: pretty.
    show_color: bool = True
    # Show data sources in the "Resources" section. Scope: global.
    show_data_sources: bool = True
    # Show the "Default" column. Scope: Asciidoc, Markdown.
    show_default: bool = True
    # Show descriptions as comments on variables. Scope: tfvars hcl.
    show_description: bool = False
    # Show the footer. Scope: global.
    show_footer: bool = False
    # Show the header. Scope: global.
    show_header: bool = True
    # Use HTML tags (a, pre, br, ...). Scope: Markdown.
    show_html: bool = True
    # Show the "Inputs" section. Scope: global.
    show_inputs: bool = True
    # Show the "Modules" section. Scope: global.
    show_module_calls: bool = True
    # Show the "Outputs" section. Scope: global.
    show_outputs: bool = True
    # Show the "Providers" section. Scope: global.
    show_providers: bool = True
    # Show the "Required" column. Scope: Asciidoc, Markdown.
    show_required: bool = True
    # Show the "Sensitive" column. Scope: Asciidoc, Markdown.
    show_sensitivity: bool = True
    # Show the "Requirements" section. Scope: global.
    show_requirements: bool = True
    # Show the "Resources" section. Scope: global.
    show_resources: bool = True
    # Show the "Type" column. Scope: Asciidoc, Markdown.
    show_type: bool = True

    def copy_sections(self, src: Any, dest: Any) -> None:
        """Copy onto ``dest`` the sections of ``src`` that are to be printed."""
        if self.show_header:
            dest.header = src.header
        if self.show_footer:
            dest.footer = src.footer
        if self.show_inputs:
            dest.inputs = src.inputs
        if self.show_module_calls:
            dest.module_calls = src.module_calls
        if self.show_outputs:
            dest.outputs = src.outputs
        if self.show_providers:
            dest.providers = src.providers
        if self.show_requirements:
            dest.requirements = src.requirements
        if self.show_resources or self.show_data_sources:
            dest.resources = self.filter_resources_by_mode(src.resources)

    def filter_resources_by_mode(self, resources: Iterable[Any]) -> list[Any]:
        """Keep managed resources and/or data sources, as the settings ask."""
        return [
            resource
            for resource in resources
            if (self.show_resources and resource.mode == "managed")
            or (self.show_data_sources and resource.mode == "data")
        ]