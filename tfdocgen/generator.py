"""Generator of the individual sections of a module's documentation."""

from __future__ import annotations

import json
import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

GenerateFunc = Callable[["Generator"], None]
GeneratorCallback = Callable[[str], GenerateFunc]

_COMPATIBLE_FORMATTERS = frozenset(
    {"asciidoc document", "asciidoc table", "markdown document", "markdown table"}
)

# Template field name -> Generator attribute.
_FIELDS = {
    "Header": "header",
    "Footer": "footer",
    "Inputs": "inputs",
    "Modules": "modules",
    "Outputs": "outputs",
    "Providers": "providers",
    "Requirements": "requirements",
    "Resources": "resources",
}

_ACTION = re.compile(r"\{\{(-[ \t\r\n])?(.*?)([ \t\r\n]-)?\}\}", re.DOTALL)
_WORD_PATTERN = re.compile(r'"(?:[^"\\]|\\.)*"|`[^`]*`|\S+')
_SPACE = " \t\r\n"


class TemplateError(Exception):
    """Raised when a content template cannot be parsed or executed."""


class Engine(ABC):
    """A format engine (json, table, yaml, ...)."""

    @abstractmethod
    def generate(self, module: Any) -> "Generator":
        """Render ``module`` into a Generator holding every section."""


@dataclass
class Generator:
    """All the sections generated for a module, plus the combined content.

    Sections may be used in a content template to form a custom layout.
    Custom templates are honoured only by compatible formatters.
    """

    formatter: str
    header: str = ""
    footer: str = ""
    inputs: str = ""
    modules: str = ""
    outputs: str = ""
    providers: str = ""
    requirements: str = ""
    resources: str = ""
    path: str = ""
    content: str = ""

    def is_compatible(self) -> bool:
        """Whether the formatter supports custom content templates."""
        return self.formatter in _COMPATIBLE_FORMATTERS

    def execute_template(self, content_tmpl: str) -> str:
        """Apply the content template, or return the combined content as is."""
        if not self.is_compatible() or content_tmpl == "":
            return self.content

        pieces: list[str] = []
        position = 0
        trim_next = False
        for match in _ACTION.finditer(content_tmpl):
            text = content_tmpl[position : match.start()]
            self._check_text(text)
            if trim_next:
                text = text.lstrip(_SPACE)
            if match.group(1):
                text = text.rstrip(_SPACE)
            pieces.append(text)
            pieces.append(self._evaluate(match.group(2)))
            trim_next = bool(match.group(3))
            position = match.end()

        tail = content_tmpl[position:]
        self._check_text(tail)
        if trim_next:
            tail = tail.lstrip(_SPACE)
        pieces.append(tail)
        return "".join(pieces)

    @staticmethod
    def _check_text(text: str) -> None:
        if "{{" in text:
            raise TemplateError("unclosed action")

    def _evaluate(self, expression: str) -> str:
        expression = expression.strip(_SPACE)
        if expression.startswith("/*") and expression.endswith("*/"):
            return ""
        words = _WORD_PATTERN.findall(expression)
        if not words:
            raise TemplateError("missing value for command")

        head, *args = words
        if head == "include":
            if len(args) != 1:
                raise TemplateError(
                    f"wrong number of args for include: want 1 got {len(args)}"
                )
            return self._include(self._value(args[0]))
        if args:
            raise TemplateError(f"can't give argument to non-function {head}")
        return self._value(head)

    def _value(self, word: str) -> str:
        if word.startswith("."):
            name = word[1:]
            if name not in _FIELDS:
                raise TemplateError(f"can't evaluate field {name}")
            return getattr(self, _FIELDS[name])
        if word.startswith('"'):
            try:
                return json.loads(word)
            except json.JSONDecodeError as exc:
                raise TemplateError(f"invalid string literal {word}") from exc
        if word.startswith("`") and word.endswith("`") and len(word) >= 2:
            return word[1:-1]
        raise TemplateError(f'function "{word}" not defined')

    def _include(self, name: str) -> str:
        try:
            with open(
                os.path.join(self.path, name), encoding="utf-8", newline=""
            ) as handle:
                return handle.read()
        except OSError as exc:
            raise TemplateError(f"error calling include: {exc}") from exc


def new_generator(name: str, *args: GenerateFunc) -> Generator:
    """Create a Generator for a formatter and apply the given section setters."""
    generator = Generator(formatter=name)
    for fn in args:
        fn(generator)
    return generator


def _setter(attribute: str) -> GeneratorCallback:
    def make(value: str) -> GenerateFunc:
        def apply(generator: Generator) -> None:
            setattr(generator, attribute, value)

        return apply

    return make


def with_content(content: str) -> GenerateFunc:
    """Set the combined content."""
    return _setter("content")(content)


def with_header(header: str) -> GenerateFunc:
    """Set the header section."""
    return _setter("header")(header)


def with_footer(footer: str) -> GenerateFunc:
    """Set the footer section."""
    return _setter("footer")(footer)


def with_inputs(inputs: str) -> GenerateFunc:
    """Set the inputs section."""
    return _setter("inputs")(inputs)


def with_modules(modules: str) -> GenerateFunc:
    """Set the modules section."""
    return _setter("modules")(modules)


def with_outputs(outputs: str) -> GenerateFunc:
    """Set the outputs section."""
    return _setter("outputs")(outputs)


def with_providers(providers: str) -> GenerateFunc:
    """Set the providers section."""
    return _setter("providers")(providers)


def with_requirements(requirements: str) -> GenerateFunc:
    """Set the requirements section."""
    return _setter("requirements")(requirements)


def with_resources(resources: str) -> GenerateFunc:
    """Set the resources section."""
    return _setter("resources")(resources)


_SECTIONS: dict[str, GeneratorCallback] = {
    "all": with_content,
    "header": with_header,
    "footer": with_footer,
    "inputs": with_inputs,
    "modules": with_modules,
    "outputs": with_outputs,
    "providers": with_providers,
    "requirements": with_requirements,
    "resources": with_resources,
}


def for_each(callback: Callable[[str, GeneratorCallback], None]) -> None:
    """Call ``callback`` with each section name and its setter factory.

    An exception raised by the callback stops the iteration and propagates.
    """
    for name, fn in _SECTIONS.items():
        callback(name, fn)