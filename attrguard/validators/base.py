"""Base condition validator — abstract class implementing the Strategy Pattern.

Each rule kind is checked by its own validator, independently testable.
New kinds are added by giving the engine another validator, not by editing it.
"""

from abc import ABC, abstractmethod
from typing import Any

from attrguard.errors import RuleConfigurationError
from attrguard.validators.models import Condition, RuleKind


class BaseConditionValidator(ABC):
    """Abstract base for all condition validators.

    Contract:
        - check() is deterministic and side-effect free
        - check() returns False for bad data
        - check() raises RuleConfigurationError when the condition cannot be
          applied to the value at all (engine misuse, not bad data)
    """

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        """The rule kind this validator handles."""
        ...

    @abstractmethod
    def check(self, value: Any, condition: Condition) -> bool:
        """Check one value against one condition.

        Args:
            value: Current attribute value read from the instance
            condition: The clause being evaluated

        Returns:
            True if the value satisfies the condition
        """
        ...

    # ── Helper Methods ──

    def _misuse(self, value: Any, reason: str) -> RuleConfigurationError:
        """Convenience method to create a RuleConfigurationError for this kind."""
        return RuleConfigurationError(
            f"'{self.kind.value}' condition cannot be applied to {type(value).__name__} value: {reason}",
            kind=self.kind.value,
        )
