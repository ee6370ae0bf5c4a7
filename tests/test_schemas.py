import pytest
from pydantic import ValidationError

from intakeoff.prompts import AssessmentData, PatientInfo, PromptBuilder, SessionDetails, TemplateName


def test_patient_info_feeds_intake_template():
    info = PatientInfo(
        name="Alex",
        age=7,
        diagnosis="ASD",
        concerns=["sleep", "transitions"],
        goals=["independent dressing"],
    )
    text = info.to_prompt_text()
    assert "Age: 7" in text
    assert "- transitions" in text

    prompt = PromptBuilder(TemplateName.PATIENT_INTAKE_ANALYSIS).set_variable("patientInfo", text).build()
    assert "Name: Alex" in prompt
    assert "{patientInfo}" not in prompt


def test_patient_info_rejects_wrong_types():
    with pytest.raises(ValidationError):
        PatientInfo(name="Alex", age="seven", diagnosis="ASD", concerns=[], goals=[])


def test_assessment_data_accepts_camel_case():
    data = AssessmentData.model_validate(
        {
            "functionalAssessment": "Escape-maintained",
            "environmentalFactors": ["noise"],
            "triggerEvents": [],
            "currentInterventions": ["visual schedule"],
        }
    )
    assert data.functional_assessment == "Escape-maintained"
    assert "Trigger Events:\n- none reported" in data.to_prompt_text()


def test_session_details_text():
    details = SessionDetails(
        date="2024-03-01",
        duration=60,
        therapist="J. Smith",
        setting="clinic",
        participants=["client", "parent"],
    )
    text = details.to_prompt_text()
    assert "Duration: 60 minutes" in text
    assert text.endswith("- client\n- parent")
