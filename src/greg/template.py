"""Placeholder substitution in template files."""

from pathlib import Path
from typing import Mapping

from .errors import TemplateError


def substitute(text: str, bindings: Mapping[str, str]) -> str:
    """Replace every occurrence of each bound placeholder in the text.

    Bindings whose placeholder does not appear are ignored and unbound
    placeholders are left as they are.
    """
    for token, value in bindings.items():
        text = text.replace(token, value)
    return text


def render_template(path: Path, bindings: Mapping[str, str]) -> str:
    """Read a template file and substitute its placeholders."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateError(f"Failed to read template {path}: {e}") from e
    return substitute(text, bindings)
