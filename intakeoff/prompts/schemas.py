"""Validation schemas for structured prompt inputs.

Each model validates shape only and renders itself as a labelled text block
via ``to_prompt_text`` so it can be dropped into a template variable.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["PatientInfo", "AssessmentData", "SessionDetails"]


def _bullets(items: List[str]) -> str:
    if not items:
        return "- none reported"
    return "\n".join(f"- {item}" for item in items)


class _PromptInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class PatientInfo(_PromptInput):
    name: str
    age: int
    diagnosis: str
    concerns: List[str]
    goals: List[str]

    def to_prompt_text(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Age: {self.age}\n"
            f"Diagnosis: {self.diagnosis}\n"
            f"Concerns:\n{_bullets(self.concerns)}\n"
            f"Goals:\n{_bullets(self.goals)}"
        )


class AssessmentData(_PromptInput):
    functional_assessment: str = Field(alias="functionalAssessment")
    environmental_factors: List[str] = Field(alias="environmentalFactors")
    trigger_events: List[str] = Field(alias="triggerEvents")
    current_interventions: List[str] = Field(alias="currentInterventions")

    def to_prompt_text(self) -> str:
        return (
            f"Functional Assessment: {self.functional_assessment}\n"
            f"Environmental Factors:\n{_bullets(self.environmental_factors)}\n"
            f"Trigger Events:\n{_bullets(self.trigger_events)}\n"
            f"Current Interventions:\n{_bullets(self.current_interventions)}"
        )


class SessionDetails(_PromptInput):
    date: str
    duration: int = Field(description="Session length in minutes")
    therapist: str
    setting: str
    participants: List[str]

    def to_prompt_text(self) -> str:
        return (
            f"Date: {self.date}\n"
            f"Duration: {self.duration} minutes\n"
            f"Therapist: {self.therapist}\n"
            f"Setting: {self.setting}\n"
            f"Participants:\n{_bullets(self.participants)}"
        )
