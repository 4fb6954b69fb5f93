"""Validation models — rule kinds, conditions, rules, violations and reports.

A Rule binds one attribute name to an ordered tuple of conditions. Each
condition is one case of a tagged variant keyed by RuleKind; a kind that is
not recognized is kept as an UnrecognizedCondition so the defect surfaces
when the rule is evaluated rather than when it is declared.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Literal, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from attrguard.errors import RuleConfigurationError


class RuleKind(str, Enum):
    """Condition kinds understood by the engine."""

    PRESENCE = "presence"  # Value is set and not empty
    FORMAT = "format"      # Textual value matches a pattern
    TYPE = "type"          # Value's class is exactly the expected class


class Condition(BaseModel, ABC):
    """One clause of a rule."""

    kind: str

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    @abstractmethod
    def parameter(self) -> Any:
        """The parameter as it appears in the declared condition mapping."""
        ...


class PresenceCondition(Condition):
    kind: Literal["presence"] = "presence"
    required: bool = True

    @property
    def parameter(self) -> bool:
        return self.required


class FormatCondition(Condition):
    kind: Literal["format"] = "format"
    pattern: re.Pattern

    @property
    def parameter(self) -> re.Pattern:
        return self.pattern


class TypeCondition(Condition):
    kind: Literal["type"] = "type"
    expected: type

    @property
    def parameter(self) -> type:
        return self.expected


class UnrecognizedCondition(Condition):
    parameter_value: Any = None

    @property
    def parameter(self) -> Any:
        return self.parameter_value


def parse_condition(kind: Any, parameter: Any) -> Condition:
    """Turn one ``kind: parameter`` entry into its Condition case.

    Raises:
        RuleConfigurationError: If the parameter cannot be used for a known kind
            (e.g. an invalid regular expression or a type that is not a class)
    """
    try:
        rule_kind = RuleKind(kind)
    except ValueError:
        return UnrecognizedCondition(kind=str(kind), parameter_value=parameter)

    try:
        if rule_kind is RuleKind.PRESENCE:
            return PresenceCondition(required=bool(parameter))
        if rule_kind is RuleKind.FORMAT:
            return FormatCondition(pattern=parameter)
        return TypeCondition(expected=parameter)
    except PydanticValidationError as e:
        raise RuleConfigurationError(
            f"Invalid parameter for '{rule_kind.value}' condition: {parameter!r}",
            kind=rule_kind.value,
        ) from e


class Rule(BaseModel):
    """An attribute name and the conditions its value must satisfy."""

    attr_name: str
    clauses: tuple[Condition, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, attr_name: str, conditions: Mapping[Any, Any]) -> "Rule":
        """Build a rule from a ``{kind: parameter}`` mapping, keeping its order."""
        return cls(
            attr_name=attr_name,
            clauses=tuple(parse_condition(kind, param) for kind, param in conditions.items()),
        )

    @property
    def conditions(self) -> dict[str, Any]:
        """The full declared condition mapping, in declaration order."""
        return {clause.kind: clause.parameter for clause in self.clauses}


def describe_value(value: Any, limit: int) -> str:
    """repr() of a value, truncated for messages and logs."""
    text = repr(value)
    if len(text) > limit:
        return text[: max(limit - 3, 0)] + "..."
    return text


class RuleViolation(BaseModel):
    """A single failed rule."""

    attr_name: str
    kind: str  # The clause that failed
    conditions: dict[str, str]  # Whole rule, rendered for reporting
    value: str  # Truncated repr of the offending value
    message: str

    @classmethod
    def from_rule(cls, rule: Rule, failed: Condition, value: Any, max_repr: int = 80) -> "RuleViolation":
        return cls(
            attr_name=rule.attr_name,
            kind=failed.kind,
            conditions={k: repr(v) for k, v in rule.conditions.items()},
            value=describe_value(value, max_repr),
            message=f"{rule.attr_name} validation failed, {rule.conditions} mismatch",
        )


class ValidationReport(BaseModel):
    """Every failing rule of one instance — the output of ``ValidationEngine.validate``."""

    passed: bool = Field(description="True if no rule failed")
    rules_checked: int = 0
    violations: list[RuleViolation] = Field(default_factory=list)
    verdict: str = Field(default="", description="Human-readable verdict")

    @classmethod
    def build(cls, violations: list[RuleViolation], rules_checked: int) -> "ValidationReport":
        passed = not violations
        if passed:
            verdict = f"PASS — {rules_checked} rule(s) satisfied."
        else:
            failed = ", ".join(v.attr_name for v in violations)
            verdict = f"FAIL — {len(violations)} of {rules_checked} rule(s) failed: {failed}."

        return cls(
            passed=passed,
            rules_checked=rules_checked,
            violations=violations,
            verdict=verdict,
        )

    def first(self) -> Optional[RuleViolation]:
        return self.violations[0] if self.violations else None


@runtime_checkable
class AttributeReader(Protocol):
    """Accessor contract for anything the engine validates."""

    def read_attribute(self, name: str) -> Any:
        ...
