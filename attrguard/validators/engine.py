"""Validation Engine — evaluates an instance against its type's rules.

Three modes over the same traversal (rules in declaration order, clauses in
declaration order, a rule stops at its first failing clause):

    engine.is_valid(user)      # bool, stops at the first failing rule
    engine.assert_valid(user)  # raises ValidationError on the first failing rule
    engine.validate(user)      # ValidationReport with every failing rule

Values are read through the instance's ``read_attribute`` on demand and are
never cached between calls.
"""

import time
from enum import Enum
from typing import Any, Iterator, Optional

import structlog

from attrguard.config import get_settings
from attrguard.errors import RuleConfigurationError, ValidationError
from attrguard.validators.base import BaseConditionValidator
from attrguard.validators.models import (
    AttributeReader,
    Condition,
    Rule,
    RuleViolation,
    ValidationReport,
    describe_value,
)
from attrguard.validators.registry import RuleRegistry, rules_for

# Import all condition validators
from attrguard.validators.presence_validator import PresenceValidator
from attrguard.validators.format_validator import FormatValidator
from attrguard.validators.type_validator import TypeValidator

logger = structlog.get_logger()


def _kind_key(kind: Any) -> str:
    """Plain-string key for a kind given as RuleKind or str."""
    return kind.value if isinstance(kind, Enum) else str(kind)


class ValidationEngine:
    """Dispatches each clause to the validator registered for its kind.

    Bad data is reported as False / ValidationError. A clause nobody can
    evaluate, or an accessor that blows up, is a defect and always raises.
    """

    def __init__(
        self,
        validators: Optional[list[BaseConditionValidator]] = None,
        max_value_repr: Optional[int] = None,
        log_evaluations: Optional[bool] = None,
    ):
        """Initialize with the default validators or a custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
            max_value_repr: Truncation length for reported values
            log_evaluations: Emit a debug event per evaluated rule
        """
        settings = get_settings()
        self.validators: dict[str, BaseConditionValidator] = {
            _kind_key(v.kind): v for v in (validators or self._default_validators())
        }
        self.max_value_repr = settings.MAX_VALUE_REPR if max_value_repr is None else max_value_repr
        self.log_evaluations = settings.LOG_EVALUATIONS if log_evaluations is None else log_evaluations

    @staticmethod
    def _default_validators() -> list[BaseConditionValidator]:
        return [
            PresenceValidator(),
            FormatValidator(),
            TypeValidator(),
        ]

    # ── Public API ──

    def is_valid(self, instance: Any, registry: Optional[RuleRegistry] = None) -> bool:
        """True if every rule passes.

        Never raises for bad data. RuleConfigurationError and accessor
        errors propagate.
        """
        return next(self._iter_failures(instance, registry), None) is None

    def assert_valid(self, instance: Any, registry: Optional[RuleRegistry] = None) -> None:
        """Return normally if every rule passes.

        Raises:
            ValidationError: For the first failing rule, with its attribute
                name and its full condition mapping
            RuleConfigurationError: If a rule cannot be evaluated
        """
        failure = next(self._iter_failures(instance, registry), None)
        if failure is None:
            return

        rule, failed, value = failure
        violation = RuleViolation.from_rule(rule, failed, value, self.max_value_repr)
        logger.info(
            "validation_failed",
            entity=type(instance).__name__,
            attr_name=rule.attr_name,
            kind=failed.kind,
            value=violation.value,
        )
        raise ValidationError(rule.attr_name, rule.conditions, value, violation)

    def validate(self, instance: Any, registry: Optional[RuleRegistry] = None) -> ValidationReport:
        """Evaluate every rule and report all failing ones.

        Each rule still stops at its own first failing clause.
        """
        start_time = time.perf_counter()
        rules = self._rules(instance, registry)

        violations = [
            RuleViolation.from_rule(rule, failed, value, self.max_value_repr)
            for rule, failed, value in self._iter_failures(instance, registry, rules=rules, stop_early=False)
        ]
        report = ValidationReport.build(violations, rules_checked=len(rules))

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            entity=type(instance).__name__,
            passed=report.passed,
            rules_checked=report.rules_checked,
            failed_attrs=[v.attr_name for v in violations],
            duration_ms=round(total_duration, 2),
        )

        return report

    def add_validator(self, validator: BaseConditionValidator) -> None:
        """Add or replace the validator for a kind."""
        self.validators[_kind_key(validator.kind)] = validator

    def remove_validator(self, kind: str) -> None:
        """Remove the validator for a kind; its clauses become unevaluable."""
        self.validators.pop(_kind_key(kind), None)

    # ── Traversal ──

    def _rules(self, instance: Any, registry: Optional[RuleRegistry]) -> tuple[Rule, ...]:
        if registry is not None:
            return registry.rules
        return rules_for(type(instance))

    def _iter_failures(
        self,
        instance: Any,
        registry: Optional[RuleRegistry],
        rules: Optional[tuple[Rule, ...]] = None,
        stop_early: bool = True,
    ) -> Iterator[tuple[Rule, Condition, Any]]:
        """Yield ``(rule, failing clause, value)`` for failing rules, lazily.

        Attribute values are read only when their rule is reached.
        """
        if rules is None:
            rules = self._rules(instance, registry)

        for rule in rules:
            value = self._read(instance, rule.attr_name)
            failed = self._first_failing_clause(rule, value)

            if self.log_evaluations:
                logger.debug(
                    "rule_evaluated",
                    entity=type(instance).__name__,
                    attr_name=rule.attr_name,
                    passed=failed is None,
                    value=describe_value(value, self.max_value_repr),
                )

            if failed is not None:
                yield rule, failed, value
                if stop_early:
                    return

    def _read(self, instance: Any, attr_name: str) -> Any:
        if not isinstance(instance, AttributeReader):
            raise RuleConfigurationError(
                f"{type(instance).__name__} does not implement read_attribute()",
                attr_name=attr_name,
            )
        return instance.read_attribute(attr_name)

    def _first_failing_clause(self, rule: Rule, value: Any) -> Optional[Condition]:
        for clause in rule.clauses:
            validator = self.validators.get(clause.kind)
            if validator is None:
                logger.error(
                    "rule_configuration_error",
                    attr_name=rule.attr_name,
                    kind=clause.kind,
                    error="unrecognized rule kind",
                )
                raise RuleConfigurationError(
                    f"Unrecognized rule kind '{clause.kind}' for attribute '{rule.attr_name}'",
                    attr_name=rule.attr_name,
                    kind=clause.kind,
                )

            try:
                ok = validator.check(value, clause)
            except RuleConfigurationError as e:
                e.attr_name = rule.attr_name
                e.details["attr_name"] = rule.attr_name
                logger.error(
                    "rule_configuration_error",
                    attr_name=rule.attr_name,
                    kind=clause.kind,
                    error=e.message,
                )
                raise

            if not ok:
                return clause
        return None


# Module-level singleton
validation_engine = ValidationEngine()
