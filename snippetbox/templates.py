"""Template registry and buffered rendering."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from fastapi.responses import HTMLResponse
from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)

from snippetbox.models.snippet import Snippet
from snippetbox.validator import Validator

PAGES_DIR = "pages"
PAGE_SUFFIX = ".html"


@dataclass
class TemplateData:
    """Everything a page template can see."""

    current_year: int
    snippet: Snippet | None = None
    snippets: list[Snippet] = field(default_factory=list)
    form: Validator | None = None


def new_template_data() -> TemplateData:
    return TemplateData(current_year=datetime.now(UTC).year)


def human_date(value: datetime) -> str:
    """Format a timestamp like '02 Jan 2006 at 15:04', in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%d %b %Y at %H:%M")


class TemplateRegistry(Mapping[str, Template]):
    """Read-only map of page name to compiled template, built once at startup."""

    def __init__(self, templates: Mapping[str, Template]):
        self._templates = dict(templates)

    def __getitem__(self, name: str) -> Template:
        return self._templates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def page(self, name: str) -> Template:
        """Look up a page template.

        A miss is a configuration error. Call this while building handlers
        so the application refuses to start rather than failing per request.
        """
        try:
            return self._templates[name]
        except KeyError:
            raise LookupError(
                f"no template found for {name}, available {sorted(self._templates)}"
            ) from None


def new_environment(loader: BaseLoader) -> Environment:
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
    )
    env.filters["human_date"] = human_date
    return env


def new_template_cache(directory: Path) -> TemplateRegistry:
    """Compile every page under `directory/pages` against the shared base and partials."""
    env = new_environment(FileSystemLoader(directory))
    pages = sorted((directory / PAGES_DIR).glob(f"*{PAGE_SUFFIX}"))
    return TemplateRegistry(
        {page.name: env.get_template(f"{PAGES_DIR}/{page.name}") for page in pages}
    )


def render(template: Template, status_code: int, data: TemplateData) -> HTMLResponse:
    """Render a page into memory, then wrap it in a response.

    Rendering finishes before any response exists, so a template error
    never leaves a half-written body behind.
    """
    body = template.render(vars(data))
    return HTMLResponse(content=body, status_code=status_code)
