"""Server-side rendering helpers.

Controllers fill a ``Model`` and name a view; ``render`` turns the pair into
an HTML response using the Jinja2 templates shipped with the package.
"""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


class Model:
    """Attributes handed to a view."""

    def __init__(self) -> None:
        self.attributes: dict[str, Any] = {}

    def add_attribute(self, key: str, value: Any) -> "Model":
        self.attributes[key] = value
        return self


def render(request: Request, view_name: str, model: Model | None = None, status_code: int = 200):
    context = dict(model.attributes) if model is not None else {}
    return templates.TemplateResponse(
        request=request,
        name=f"{view_name}.html",
        context=context,
        status_code=status_code,
    )


def form_fields(form, *keys: str) -> dict[str, Any]:
    """Pick ``keys`` from submitted form data; blank values become ``None``."""
    data = {}
    for key in keys:
        value = form.get(key)
        if isinstance(value, str):
            value = value.strip() or None
        data[key] = value
    return data


def field_errors(exc) -> dict[str, str]:
    """Map a pydantic ValidationError to ``{field: message}`` for forms."""
    errors = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(field, error["msg"])
    return errors
