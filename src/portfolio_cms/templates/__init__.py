"""Resume layouts, looked up by the ``template`` value stored on a resume."""

from __future__ import annotations

from portfolio_cms.templates.base import ResumeTemplate
from portfolio_cms.templates.classic import ClassicResumeTemplate
from portfolio_cms.templates.minimal import MinimalResumeTemplate
from portfolio_cms.templates.modern import ModernResumeTemplate

__all__ = [
    "ResumeTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[str, ResumeTemplate] = {
    layout.key: layout()
    for layout in (ClassicResumeTemplate, MinimalResumeTemplate, ModernResumeTemplate)
}


def get_template(key: str) -> ResumeTemplate:
    """Return the layout stored resumes refer to as *key*.

    Raises:
        ValueError: If no layout uses that key.
    """
    layout = _REGISTRY.get(key)
    if layout is None:
        raise ValueError(f"Unknown template {key!r}. Available: {', '.join(list_templates())}")
    return layout


def list_templates() -> list[str]:
    return sorted(_REGISTRY)
