"""Template library and registry for clinical documentation prompts."""
from __future__ import annotations

import json
import logging
import re
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Union

from ..core.exceptions import ConfigurationError, UnknownTemplateError

logger = logging.getLogger("intakeoff")

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")


class TemplateName(str, Enum):
    """Symbolic names of the built-in prompt templates."""

    PATIENT_INTAKE_ANALYSIS = "PATIENT_INTAKE_ANALYSIS"
    BEHAVIOR_PLAN_GENERATION = "BEHAVIOR_PLAN_GENERATION"
    THERAPY_SESSION_NOTES = "THERAPY_SESSION_NOTES"
    INSURANCE_DOCUMENTATION = "INSURANCE_DOCUMENTATION"


# ------------------------------------------------------------------
# Built-in prompt templates keyed by symbolic name
# ------------------------------------------------------------------
PROMPT_TEMPLATES: Dict[str, str] = {
    TemplateName.PATIENT_INTAKE_ANALYSIS.value: """
Analyze the following patient intake information and provide structured insights:

Patient Information:
{patientInfo}

Please provide:
1. Risk assessment summary
2. Recommended therapy approaches
3. Priority areas for intervention
4. Family engagement strategies
5. Timeline recommendations

Format your response as structured JSON with clear sections.
""",
    TemplateName.BEHAVIOR_PLAN_GENERATION.value: """
Generate a comprehensive behavior intervention plan based on:

Assessment Data:
{assessmentData}

Target Behaviors:
{targetBehaviors}

Please create:
1. Functional behavior assessment summary
2. Replacement behavior strategies
3. Environmental modifications
4. Data collection procedures
5. Progress monitoring guidelines
""",
    TemplateName.THERAPY_SESSION_NOTES.value: """
Generate structured therapy session notes based on:

Session Details:
{sessionDetails}

Activities Completed:
{activities}

Observations:
{observations}

Please provide:
1. Session summary
2. Goal progress analysis
3. Behavior observations
4. Recommendations for next session
5. Family/caregiver notes
""",
    TemplateName.INSURANCE_DOCUMENTATION.value: """
Create professional insurance documentation for:

Patient: {patientName}
Service Dates: {serviceDates}
Services Provided: {services}
Clinical Justification: {justification}

Generate:
1. Prior authorization request
2. Progress report summary
3. Medical necessity documentation
4. Treatment plan updates
5. Outcome measurements
""",
}


def find_placeholders(template: str) -> List[str]:
    """Return placeholder identifiers in order of first appearance."""
    seen: Dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1))
    return list(seen)


class TemplateRegistry(Mapping[str, str]):
    """Read-only mapping of symbolic template names to template text.

    A registry is fixed once built. Builders receive one explicitly, so tests
    can hand in an isolated registry instead of sharing the built-ins.
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None) -> None:
        source = PROMPT_TEMPLATES if templates is None else templates
        self._templates = MappingProxyType(dict(source))

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------
    def __getitem__(self, name: str) -> str:
        return self._templates[_key(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._templates

    def __repr__(self) -> str:
        return f"TemplateRegistry({sorted(self._templates)!r})"

    # ------------------------------------------------------------------
    def resolve(self, name: Union[str, TemplateName]) -> str:
        """Return template text for *name* or raise :class:`UnknownTemplateError`."""
        key = _key(name)
        try:
            return self._templates[key]
        except KeyError:
            raise UnknownTemplateError(key) from None

    def placeholders(self, name: Union[str, TemplateName]) -> List[str]:
        """Return the documented placeholder names of template *name*."""
        return find_placeholders(self.resolve(name))

    def merged(self, templates: Mapping[str, str]) -> "TemplateRegistry":
        """Return a new registry with *templates* layered over this one."""
        return TemplateRegistry({**self._templates, **templates})

    @classmethod
    def from_json(
        cls, path: Union[str, Path], base: Optional["TemplateRegistry"] = None
    ) -> "TemplateRegistry":
        """Load named templates from a JSON object file over *base*.

        ``base`` defaults to the built-in registry.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            raise ConfigurationError(
                f"Prompt template file {path} not found", context={"path": str(path)}
            ) from exc
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Failed to decode JSON from prompt template file {path}: {exc}",
                context={"path": str(path)},
            ) from exc

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise ConfigurationError(
                f"Prompt template file {path} must map names to template strings",
                context={"path": str(path)},
            )

        logger.info("Loaded %d prompt templates from %s", len(data), path)
        return (base if base is not None else cls()).merged(data)


def _key(name: Union[str, TemplateName]) -> str:
    return name.value if isinstance(name, TemplateName) else name


default_registry = TemplateRegistry()

__all__ = [
    "PLACEHOLDER_PATTERN",
    "PROMPT_TEMPLATES",
    "TemplateName",
    "TemplateRegistry",
    "default_registry",
    "find_placeholders",
]
