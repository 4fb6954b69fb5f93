"""Validatable mixin — declare rules on a class, check them on its instances.

Usage:
    class User(Validatable):
        def __init__(self, name=None, owner=None):
            self.name = name
            self.owner = owner

    User.validates("name", presence=True)
    User.validates("owner", type=int)

    User(name="aaa", owner=1).is_valid()  # True
"""

from typing import Any, ClassVar, Mapping, Optional

from attrguard.errors import RuleConfigurationError
from attrguard.validators.engine import validation_engine
from attrguard.validators.models import Rule, ValidationReport
from attrguard.validators.registry import RuleRegistry, registry_for


class Validatable:
    """Gives every subclass its own RuleRegistry, shared by its instances.

    A subclass is held to its parent's rules as well as its own; rules it
    declares do not apply to the parent.
    """

    rules: ClassVar[RuleRegistry]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__.get("rules")
        if isinstance(declared, RuleRegistry):
            return
        if declared is not None:
            raise RuleConfigurationError(
                f"{cls.__qualname__}.rules is reserved for the rule registry, got {type(declared).__name__}"
            )
        cls.rules = RuleRegistry(owner=cls.__qualname__, parent=registry_for(cls))

    @classmethod
    def validates(cls, attr_name: str, conditions: Optional[Mapping[Any, Any]] = None, **kw: Any) -> Rule:
        """Declare a rule for ``attr_name`` on this class."""
        return cls.rules.register(attr_name, conditions, **kw)

    def read_attribute(self, name: str) -> Any:
        """Current value of ``name``. AttributeError for unknown names propagates."""
        return getattr(self, name)

    def is_valid(self) -> bool:
        return validation_engine.is_valid(self)

    def assert_valid(self) -> None:
        validation_engine.assert_valid(self)

    def validation_report(self) -> ValidationReport:
        return validation_engine.validate(self)
