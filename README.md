# tfdocgen

Building blocks for turning infrastructure module metadata into Markdown and
AsciiDoc documentation. The package has no dependencies outside the standard
library.

## What is in it

- `tfdocgen.settings.Settings` – a dataclass holding every switch that controls
  which sections are shown and how text is escaped (`escape_characters`,
  `show_html`, `show_anchor`, `show_header`, `show_inputs`, `show_resources`,
  `show_data_sources`, `indent_level` and so on), each with its default.
  `copy_sections(src, dest)` copies the enabled sections from one module object
  to another, and `filter_resources_by_mode(resources)` keeps the resources whose
  `mode` is `"managed"` and/or `"data"` as the settings ask.
- `tfdocgen.generator` – a `Generator` dataclass holding the rendered sections
  (`header`, `footer`, `inputs`, `modules`, `outputs`, `providers`,
  `requirements`, `resources`), the combined `content`, the module `path` and
  the `formatter` name. `new_generator(name, *setters)` builds one from setters
  such as `with_header`, `with_inputs` or `with_content`; `for_each(callback)`
  calls the callback with every section name (`"all"`, `"header"`, ...) and its
  setter. `Engine` is an abstract base class whose `generate(module)` returns a
  `Generator`.
- `tfdocgen.lines.Lines` – collects the lines just above a given line of a file
  (`line_num`), or the leading block of a file (`line_num=-1`), that satisfy a
  `condition`, each passed through a `parser`. `extract()` reads `file_name`;
  `extract_from(stream)` reads an open text stream. A file with too few lines
  raises `ValueError`.
- `tfdocgen.sanitizer` – turns free text into safe Markdown or AsciiDoc:
  `sanitize_document`, `sanitize_section`, `sanitize_markdown_table` and
  `sanitize_asciidoc_table` escape underscores (and pipes in tables) outside
  code, keep fenced and inline code intact, join multi-line paragraphs and
  restore URLs. Empty input gives `"n/a"`. The lower-level helpers
  (`sanitize_name`, `escape_illegal_characters`, `convert_multiline_text`,
  `convert_one_line_code_block`, `normalize_urls`, `process_segments`,
  `execute_per_line`) are public too.
- `tfdocgen.anchor` – `create_anchor_markdown(type, name, settings)` and
  `create_anchor_asciidoc(type, name, settings)` build linkable names for items.

## Content templates

`Generator.execute_template(template)` returns `content` unchanged when the
template is empty or when the formatter is not one of `"asciidoc document"`,
`"asciidoc table"`, `"markdown document"` or `"markdown table"`. Otherwise it
fills the template, which understands a small set of actions:

- `{{ .Header }}`, `{{ .Inputs }}`, ... – the section of that name
  (`Header`, `Footer`, `Inputs`, `Modules`, `Outputs`, `Providers`,
  `Requirements`, `Resources`);
- `{{ include "file.txt" }}` – the text of a file relative to `path`;
- `{{ "literal" }}` and `` {{ `raw` }} `` – string literals;
- `{{/* comment */}}`, and `{{-` / `-}}` to trim surrounding whitespace.

Anything else, an unknown field, or a file that cannot be read raises
`tfdocgen.generator.TemplateError`. Conditionals, loops and pipelines are not
supported.

## Example

```python
from tfdocgen.settings import Settings
from tfdocgen.sanitizer import sanitize_markdown_table
from tfdocgen.anchor import create_anchor_markdown

settings = Settings()
print(sanitize_markdown_table("Name of the `foo_bar` bucket_name\n\n| a | b |", settings))
print(create_anchor_markdown("input", "bucket_name", settings))
```

```python
from tfdocgen.generator import new_generator, with_header, with_content

gen = new_generator("markdown table", with_header("My module"), with_content("full text"))
print(gen.execute_template("{{ .Header }}"))   # -> My module
print(gen.execute_template(""))                # -> full text
```

## What it does not do

The package does not read or parse module source files, does not render the
sections itself (there are no built-in Markdown, AsciiDoc, JSON or YAML
formatters implementing `Engine`), and has no command-line tool. It provides
the settings, text sanitising, anchors, comment extraction and section
assembly that such a tool is built from.

## Running the tests

```
pip install -e ".[test]"
pytest
```