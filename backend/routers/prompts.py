from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from intakeoff.core.bootstrap import container
from intakeoff.core.exceptions import UnknownTemplateError
from intakeoff.prompts import PromptBuilder, TemplateRegistry

logger = logging.getLogger("intakeoff")

router = APIRouter(prefix="/api/prompts", tags=["prompts"])


class TemplateInfo(BaseModel):
    name: str
    placeholders: List[str]


class RenderRequest(BaseModel):
    variables: Dict[str, str] = Field(default_factory=dict)


class RenderResponse(BaseModel):
    name: str
    prompt: str
    unresolved: List[str]


def get_registry() -> TemplateRegistry:
    return container.resolve(TemplateRegistry)


@router.get("", response_model=List[TemplateInfo])
def list_templates(registry: TemplateRegistry = Depends(get_registry)):
    """Return available prompt templates with their placeholders."""
    return [
        TemplateInfo(name=name, placeholders=registry.placeholders(name))
        for name in registry
    ]


@router.post("/{name}/render", response_model=RenderResponse)
def render_template(
    name: str,
    req: RenderRequest,
    registry: TemplateRegistry = Depends(get_registry),
):
    """Substitute variables into template *name*; nothing is sent to an LLM."""
    try:
        builder = PromptBuilder.from_name(name, registry=registry)
    except UnknownTemplateError as exc:
        logger.warning("Render request for unknown template: %s", name)
        raise HTTPException(status_code=404, detail=str(exc))

    builder.set_variables(req.variables)
    unresolved = builder.unresolved()
    if unresolved:
        logger.info("Template %s rendered with unresolved placeholders: %s", name, unresolved)
    return RenderResponse(name=name, prompt=builder.build(), unresolved=unresolved)
