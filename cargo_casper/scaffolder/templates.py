"""Template lookup and Jinja2 rendering for project scaffolding.

Templates live in ``cargo_casper/scaffolder/templates/`` and are addressed by
the ``Template`` enum.  Manifest templates (``*.j2``) are rendered with a
context; everything else is static and returned byte-for-byte.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class Template(str, Enum):
    """Identifiers of every template shipped with the tool."""

    CONTRACT_MANIFEST = "contract/Cargo.toml.j2"
    CONTRACT_MAIN = "contract/src/main.rs.in"
    TESTS_MANIFEST = "tests/Cargo.toml.j2"
    TESTS_MAIN = "tests/src/integration_tests.rs.in"
    MAKEFILE = "Makefile.in"
    MAKEFILE_WITH_WRAPPER = "Makefile-wrapper.in"
    TRAVIS_YML = "travis.yml.in"
    WRAPPER = "helper/wrapper.rs.in"

    @property
    def is_jinja(self) -> bool:
        return self.value.endswith(".j2")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Resolves ``Template`` identifiers to file content.

    Jinja templates are rendered with a context dictionary; static templates
    are read verbatim so Makefile tabs and Rust braces survive untouched.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template: Template, context: dict[str, Any]) -> str:
        """Render a Jinja template with the provided context.

        Raises:
            ValueError: If *template* is a static template.
        """
        if not template.is_jinja:
            raise ValueError(f"{template.name} is a static template; use load()")
        return self.env.get_template(template.value).render(**context)

    def load(self, template: Template) -> str:
        """Return the raw content of a static template."""
        if template.is_jinja:
            raise ValueError(f"{template.name} needs a context; use render()")
        path = self.template_dir / template.value
        return path.read_text(encoding="utf-8")

    def list_templates(self) -> list[str]:
        """Return a sorted list of every template file under the template root."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in self.template_dir.rglob("*")
            if p.is_file()
        )
