"""Snippet pages: home, view and create."""

import re
from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse

from snippetbox.api.dependencies import get_snippet_service
from snippetbox.forms import SnippetCreateForm
from snippetbox.services.errors import NoRecordError
from snippetbox.services.snippet_service import SnippetService
from snippetbox.templates import TemplateRegistry, new_template_data, render

INT_RX = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Digits in INT64_MAX; longer input cannot fit and is not worth converting
INT64_DIGITS = 19


def parse_int(raw: str) -> int | None:
    """Parse a plain ASCII decimal that fits a 64-bit column, else None.

    Stricter than int(): no whitespace, underscores or non-ASCII digits.
    """
    if INT_RX.fullmatch(raw) is None or len(raw.lstrip("+-").lstrip("0")) > INT64_DIGITS:
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_positive_int(raw: str) -> int | None:
    """Parse a decimal id; None unless it is a positive integer."""
    value = parse_int(raw)
    if value is None or value < 1:
        return None
    return value


def snippet_routes(templates: TemplateRegistry) -> APIRouter:
    """Build the snippet router. Missing page templates fail here, at startup."""
    router = APIRouter(tags=["snippets"])

    home_page = templates.page("home.html")
    view_page = templates.page("view.html")
    create_page = templates.page("create.html")

    @router.get("/", response_class=HTMLResponse)
    def home(snippets: Annotated[SnippetService, Depends(get_snippet_service)]):
        """List the latest visible snippets."""
        data = new_template_data()
        data.snippets = snippets.latest()
        return render(home_page, status.HTTP_200_OK, data)

    @router.get("/snippet/view/{snippet_id}", response_class=HTMLResponse)
    def snippet_view(
        snippet_id: str,
        snippets: Annotated[SnippetService, Depends(get_snippet_service)],
    ):
        """Show one snippet, or 404 if it is unknown or expired."""
        parsed_id = parse_positive_int(snippet_id)
        if parsed_id is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

        try:
            snippet = snippets.get(parsed_id)
        except NoRecordError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from None

        data = new_template_data()
        data.snippet = snippet
        return render(view_page, status.HTTP_200_OK, data)

    @router.get("/snippet/create", response_class=HTMLResponse)
    def snippet_create_form():
        """Show an empty create form."""
        data = new_template_data()
        data.form = SnippetCreateForm()
        return render(create_page, status.HTTP_200_OK, data)

    @router.post("/snippet/create")
    def snippet_create_post(
        snippets: Annotated[SnippetService, Depends(get_snippet_service)],
        title: Annotated[str, Form()] = "",
        content: Annotated[str, Form()] = "",
        expires: Annotated[str, Form()] = "",
    ):
        """Validate and store a snippet, then redirect to it."""
        expires_days = parse_int(expires)
        if expires_days is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)

        form = SnippetCreateForm(title=title, content=content, expires=expires_days)
        if form.validate():
            data = new_template_data()
            data.form = form
            return render(create_page, HTTPStatus.UNPROCESSABLE_ENTITY, data)

        snippet_id = snippets.insert(form.title, form.content, form.expires)
        return RedirectResponse(f"/snippet/view/{snippet_id}", status_code=status.HTTP_303_SEE_OTHER)

    return router
