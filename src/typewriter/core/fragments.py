"""Lookup of per-language template fragments.

Fragments live at ``{root}/{language}/{name}.tmpl`` and use Jinja2 syntax.
Nothing is cached: every call to :meth:`FragmentResolver.resolve` reads and
parses the file again.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound, TemplateSyntaxError

from typewriter.config import get_templates_dir
from typewriter.core.languages import native_type
from typewriter.errors import FragmentNotFoundError, FragmentParseError

logger = logging.getLogger(__name__)

FRAGMENT_NAMES = frozenset(
    {
        "header",
        "declaration",
        "basic",
        "map_key",
        "map_value",
        "map_close",
        "array_open",
        "array_close",
        "struct_open",
        "struct_close",
        "field_name",
        "field_close",
        "comment",
    }
)


class FragmentResolver:
    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root) if root is not None else get_templates_dir()
        self._env = Environment(
            loader=FileSystemLoader(str(self.root)),
            undefined=StrictUndefined,
            autoescape=False,
            cache_size=0,
        )
        self._env.filters["native"] = native_type

    def resolve(self, language: str, name: str) -> Template:
        """Load and parse the fragment ``name`` for ``language``."""
        if name not in FRAGMENT_NAMES:
            raise FragmentNotFoundError(language, name)
        path = f"{language}/{name}.tmpl"
        logger.debug("Resolving fragment %s from %s", path, self.root)
        try:
            return self._env.get_template(path)
        except TemplateSyntaxError as exc:
            raise FragmentParseError(language, name, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise FragmentParseError(language, name, f"not valid UTF-8: {exc}") from exc
        except (TemplateNotFound, OSError) as exc:
            raise FragmentNotFoundError(language, name) from exc

    def languages(self) -> list[str]:
        """List the languages that have a fragment directory under the root."""
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if p.is_dir() and not p.name.startswith((".", "_")))
