"""Presence Validator — the value must be set and not empty."""

from typing import Any

from attrguard.validators.base import BaseConditionValidator
from attrguard.validators.models import Condition, RuleKind


class PresenceValidator(BaseConditionValidator):
    """Fails on None and on empty strings or sequences."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.PRESENCE

    def check(self, value: Any, condition: Condition) -> bool:
        if not condition.required:
            return True
        if value is None:
            return False

        try:
            return len(value) > 0
        except TypeError:
            raise self._misuse(value, "it has no notion of emptiness") from None
