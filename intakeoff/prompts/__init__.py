from __future__ import annotations

"""Prompt templates, registry and placeholder substitution."""

from .builder import PromptBuilder  # noqa: F401
from .schemas import AssessmentData, PatientInfo, SessionDetails  # noqa: F401
from .templates import (  # noqa: F401
    PROMPT_TEMPLATES,
    TemplateName,
    TemplateRegistry,
    default_registry,
    find_placeholders,
)

__all__ = [
    "PromptBuilder",
    "PROMPT_TEMPLATES",
    "TemplateName",
    "TemplateRegistry",
    "default_registry",
    "find_placeholders",
    "PatientInfo",
    "AssessmentData",
    "SessionDetails",
]
