r"""Rule registry and validation engine.

Usage:
    from attrguard.validators import RuleRegistry, validation_engine

    registry = RuleRegistry()
    registry.register("number", format=r"^[A-Z\-]{0,3}$", presence=True)
    validation_engine.is_valid(entity, registry)
"""

from attrguard.validators.engine import ValidationEngine, validation_engine
from attrguard.validators.models import (
    AttributeReader,
    Rule,
    RuleKind,
    RuleViolation,
    ValidationReport,
)
from attrguard.validators.registry import RuleRegistry, rules_for

__all__ = [
    "AttributeReader",
    "Rule",
    "RuleKind",
    "RuleRegistry",
    "RuleViolation",
    "ValidationEngine",
    "ValidationReport",
    "rules_for",
    "validation_engine",
]
