"""Rule registry — the ordered rules declared for one entity type.

One registry per entity type, shared by all of its instances. Rules are
appended while the type is being defined and read on every evaluation.
"""

import threading
from typing import Any, Iterator, Mapping, Optional

import structlog

from attrguard.validators.models import Rule

logger = structlog.get_logger()


class RuleRegistry:
    """Append-only, ordered collection of Rules.

    Readers get a snapshot tuple, so an evaluation in progress never sees a
    rule registered after it started. A registry with a parent yields the
    parent's rules first, including ones the parent gains later.
    """

    def __init__(self, owner: Optional[str] = None, parent: Optional["RuleRegistry"] = None):
        self.owner = owner
        self.parent = parent
        self._rules: list[Rule] = []
        self._lock = threading.Lock()

    def register(self, attr_name: str, conditions: Optional[Mapping[Any, Any]] = None, **kw: Any) -> Rule:
        """Append a rule for ``attr_name``.

        Conditions may be given as a mapping, as keywords, or both (mapping
        entries first). The attribute name is not checked here; a bad name
        surfaces when the rule is evaluated.

        Args:
            attr_name: Attribute the rule reads
            conditions: Ordered ``{kind: parameter}`` mapping

        Returns:
            The registered Rule
        """
        merged = dict(conditions or {})
        merged.update(kw)
        rule = Rule.from_mapping(attr_name, merged)

        with self._lock:
            self._rules.append(rule)

        logger.debug(
            "rule_registered",
            owner=self.owner,
            attr_name=attr_name,
            kinds=[c.kind for c in rule.clauses],
        )
        return rule

    @property
    def rules(self) -> tuple[Rule, ...]:
        inherited = self.parent.rules if self.parent is not None else ()
        with self._lock:
            return inherited + tuple(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(owner={self.owner!r}, rules={len(self)})"


def registry_for(entity_type: type) -> Optional[RuleRegistry]:
    """The registry attached to ``entity_type`` as ``rules``, if it has one."""
    registry = getattr(entity_type, "rules", None)
    return registry if isinstance(registry, RuleRegistry) else None


def rules_for(entity_type: type) -> tuple[Rule, ...]:
    """Ordered rules declared for ``entity_type``; empty if it declares none."""
    registry = registry_for(entity_type)
    return registry.rules if registry is not None else ()
