"""narrative: fixed and templated explanations, rendered as text."""

from .templates import (
    NarrativeTemplateBundle,
    TemplateStore,
    DEFAULT_TEMPLATES,
    DEFAULT_STORE,
    EMPTY_BUNDLE,
)
from .generator import NarrativeGenerator, format_narrative

__all__ = [
    "NarrativeTemplateBundle", "TemplateStore",
    "DEFAULT_TEMPLATES", "DEFAULT_STORE", "EMPTY_BUNDLE",
    "NarrativeGenerator", "format_narrative",
]
