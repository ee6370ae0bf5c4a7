import json

import pytest

from intakeoff.core.bootstrap import build_template_registry
from intakeoff.core.exceptions import ConfigurationError, UnknownTemplateError
from intakeoff.prompts import (
    PROMPT_TEMPLATES,
    TemplateName,
    TemplateRegistry,
    default_registry,
    find_placeholders,
)


def test_builtin_registry_has_every_template_name():
    assert set(default_registry) == {name.value for name in TemplateName}
    assert len(default_registry) == len(PROMPT_TEMPLATES)


@pytest.mark.parametrize(
    "name,expected",
    [
        (TemplateName.PATIENT_INTAKE_ANALYSIS, ["patientInfo"]),
        (TemplateName.BEHAVIOR_PLAN_GENERATION, ["assessmentData", "targetBehaviors"]),
        (TemplateName.THERAPY_SESSION_NOTES, ["sessionDetails", "activities", "observations"]),
        (
            TemplateName.INSURANCE_DOCUMENTATION,
            ["patientName", "serviceDates", "services", "justification"],
        ),
    ],
)
def test_builtin_placeholders(name, expected):
    assert default_registry.placeholders(name) == expected


def test_find_placeholders_dedupes_in_order():
    assert find_placeholders("{b} {a} {b} {} {x.y}") == ["b", "a", "x.y"]


def test_registry_accepts_enum_and_string_names():
    name = TemplateName.PATIENT_INTAKE_ANALYSIS
    assert default_registry.resolve(name) == default_registry.resolve(name.value)
    assert name in default_registry
    assert "nope" not in default_registry
    assert 42 not in default_registry


def test_registry_is_isolated_from_source_mapping():
    source = {"A": "{x}"}
    registry = TemplateRegistry(source)
    source["B"] = "{y}"
    assert list(registry) == ["A"]


def test_resolve_unknown_raises():
    with pytest.raises(UnknownTemplateError):
        TemplateRegistry({}).resolve("PATIENT_INTAKE_ANALYSIS")


def test_merged_returns_new_registry():
    base = TemplateRegistry({"A": "a", "B": "b"})
    merged = base.merged({"B": "bee", "C": "c"})
    assert dict(merged) == {"A": "a", "B": "bee", "C": "c"}
    assert dict(base) == {"A": "a", "B": "b"}


def test_from_json_layers_over_builtins(tmp_path):
    store = tmp_path / "prompts.json"
    store.write_text(json.dumps({"FOLLOW_UP": "Follow up with {patientName}"}), encoding="utf-8")

    registry = TemplateRegistry.from_json(store)
    assert registry.placeholders("FOLLOW_UP") == ["patientName"]
    assert TemplateName.INSURANCE_DOCUMENTATION in registry


def test_from_json_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        TemplateRegistry.from_json(tmp_path / "missing.json")


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"A": 1}'])
def test_from_json_rejects_bad_content(tmp_path, content):
    store = tmp_path / "prompts.json"
    store.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        TemplateRegistry.from_json(store)


class _StubConfig:
    def __init__(self, **values):
        self._values = values

    def get(self, key, default=None):
        return self._values.get(key, default)


def test_build_template_registry_defaults_to_builtins():
    assert build_template_registry(_StubConfig()) is default_registry


def test_build_template_registry_reads_prompt_store(tmp_path):
    store = tmp_path / "prompts.json"
    store.write_text(json.dumps({"EXTRA": "{x}"}), encoding="utf-8")
    registry = build_template_registry(_StubConfig(prompt_store=store))
    assert "EXTRA" in registry
    assert len(registry) == len(PROMPT_TEMPLATES) + 1
