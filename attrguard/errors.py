"""Exception types raised by the validation engine.

Two families, kept apart on purpose:
    - ValidationError: the data is bad (recoverable by the caller)
    - RuleConfigurationError: the rules themselves are malformed (a defect)
"""

from typing import Any, Dict, Optional


class AttrGuardError(Exception):
    """Base exception for attrguard."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(AttrGuardError, ValueError):
    """An attribute value failed one of its rule's conditions."""

    def __init__(self, attr_name: str, conditions: Dict[str, Any], value: Any = None, violation=None):
        self.attr_name = attr_name
        self.conditions = conditions
        self.value = value
        self.violation = violation
        super().__init__(
            "VALIDATION_FAILED",
            f"{attr_name} validation failed, {conditions} mismatch",
            {"attr_name": attr_name, "conditions": {k: repr(v) for k, v in conditions.items()}},
        )


class RuleConfigurationError(AttrGuardError):
    """A rule cannot be evaluated: unknown kind, or a kind applied to the wrong value."""

    def __init__(self, message: str, attr_name: Optional[str] = None, kind: Optional[str] = None):
        self.attr_name = attr_name
        self.kind = kind
        super().__init__(
            "RULE_CONFIGURATION_ERROR",
            message,
            {"attr_name": attr_name, "kind": kind},
        )
