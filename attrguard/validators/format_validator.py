"""Format Validator — the textual value must match the configured pattern.

The pattern is applied as given with ``search``; anchor it (``^...$``) when
the whole value has to match.
"""

from typing import Any

from attrguard.validators.base import BaseConditionValidator
from attrguard.validators.models import Condition, RuleKind


class FormatValidator(BaseConditionValidator):

    @property
    def kind(self) -> RuleKind:
        return RuleKind.FORMAT

    def check(self, value: Any, condition: Condition) -> bool:
        if value is None:
            return False
        if not isinstance(value, str):
            raise self._misuse(value, "only text can be matched against a pattern")
        return condition.pattern.search(value) is not None
