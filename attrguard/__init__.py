"""attrguard — declarative per-attribute validation rules."""

from attrguard.entity import Validatable
from attrguard.errors import AttrGuardError, RuleConfigurationError, ValidationError
from attrguard.logging_setup import configure_logging
from attrguard.validators import (
    AttributeReader,
    Rule,
    RuleKind,
    RuleRegistry,
    RuleViolation,
    ValidationEngine,
    ValidationReport,
    rules_for,
    validation_engine,
)

__version__ = "0.1.0"

__all__ = [
    "AttrGuardError",
    "AttributeReader",
    "Rule",
    "RuleConfigurationError",
    "RuleKind",
    "RuleRegistry",
    "RuleViolation",
    "Validatable",
    "ValidationEngine",
    "ValidationError",
    "ValidationReport",
    "configure_logging",
    "rules_for",
    "validation_engine",
]
