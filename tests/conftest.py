import pytest

from intakeoff.prompts import TemplateRegistry


@pytest.fixture()
def isolated_registry():
    """Registry independent of the built-in templates."""
    return TemplateRegistry(
        {
            "GREETING": "Hi {who}",
            "REFERRAL": "Refer {patient} to {specialist} for {reason}.",
        }
    )
