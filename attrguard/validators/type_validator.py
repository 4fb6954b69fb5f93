"""Type Validator — exact class equality, no subclasses, no coercion."""

from typing import Any

from attrguard.validators.base import BaseConditionValidator
from attrguard.validators.models import Condition, RuleKind


class TypeValidator(BaseConditionValidator):
    """``True`` fails an ``int`` condition, ``1.0`` fails it too."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.TYPE

    def check(self, value: Any, condition: Condition) -> bool:
        return type(value) is condition.expected
