from __future__ import annotations

"""Placeholder substitution for prompt templates.

A :class:`PromptBuilder` holds one template and a table of variables. Calling
:meth:`PromptBuilder.build` replaces every ``{key}`` for each key in the
table; placeholders without a value are left in the output untouched.

Keys are matched as literal substrings, so ``{a.b}`` or ``{a*}`` only ever
match themselves. Keys are applied one after another in insertion order,
and a value that contains another ``{key}`` token may or may not be
substituted again depending on that order. Callers should not rely on
either outcome.
"""

from typing import Dict, List, Mapping, Optional, Union

from .templates import TemplateName, TemplateRegistry, default_registry, find_placeholders

__all__ = ["PromptBuilder"]


class PromptBuilder:
    """Accumulate template variables and render the substituted prompt.

    ``template`` is either literal template text or a :class:`TemplateName`
    resolved through ``registry`` (the built-in registry when omitted).
    Setter methods mutate this builder and return it for chaining.
    """

    def __init__(
        self,
        template: Union[str, TemplateName],
        registry: Optional[TemplateRegistry] = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        if isinstance(template, TemplateName):
            self._template = self._registry.resolve(template)
        else:
            self._template = template
        self._variables: Dict[str, str] = {}

    @classmethod
    def from_name(cls, name: str, registry: Optional[TemplateRegistry] = None) -> "PromptBuilder":
        """Build from a symbolic template *name*; raises ``UnknownTemplateError``."""
        registry = registry if registry is not None else default_registry
        return cls(registry.resolve(name), registry=registry)

    # ------------------------------------------------------------------
    @property
    def template(self) -> str:
        return self._template

    @property
    def variables(self) -> Dict[str, str]:
        """Copy of the current variable table."""
        return dict(self._variables)

    # ------------------------------------------------------------------
    def set_variable(self, key: str, value: str) -> "PromptBuilder":
        self._variables[key] = value
        return self

    def set_variables(self, variables: Mapping[str, str]) -> "PromptBuilder":
        self._variables.update(variables)
        return self

    def reset(self) -> "PromptBuilder":
        self._variables.clear()
        return self

    # ------------------------------------------------------------------
    def build(self) -> str:
        """Return the template with every known placeholder substituted."""
        result = self._template
        for key, value in self._variables.items():
            result = result.replace("{" + key + "}", value)
        return result

    def unresolved(self) -> List[str]:
        """Template placeholders that have no value in the table.

        Only the template is scanned; braces inside supplied values are not
        placeholders.
        """
        return [name for name in find_placeholders(self._template) if name not in self._variables]

    def __repr__(self) -> str:
        return f"PromptBuilder(template={self._template[:40]!r}, variables={sorted(self._variables)!r})"
