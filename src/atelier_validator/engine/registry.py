"""ValidatorRegistry: per-field rule bookkeeping with an explicit freeze step."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import RegistryFrozenError
from .field import FieldIdentity, FieldRuleSet, FrozenFieldRules

if TYPE_CHECKING:
    from ..constraints.constraint import Constraint, CrossFieldCheck

logger = logging.getLogger(__name__)


def _describe(
    rules: tuple[FrozenFieldRules, ...] | list[FieldRuleSet],
) -> dict[str, Any]:
    return {
        rule_set.field_name: {
            "constraints": [c.code.value for c in rule_set.constraints],
            "cross_field_checks": [c.code.value for c in rule_set.cross_field_checks],
        }
        for rule_set in rules
    }


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable copy of a registry, safe to share between threads.

    ``field_rules`` follows field registration order; ``cross_field_rules``
    follows the order in which each field received its first cross-field
    check.
    """

    field_rules: tuple[FrozenFieldRules, ...]
    cross_field_rules: tuple[FrozenFieldRules, ...]
    name: str | None = None

    @property
    def is_empty(self) -> bool:
        return not any(r.constraints for r in self.field_rules) and not any(
            r.cross_field_checks for r in self.cross_field_rules
        )

    def field_names(self) -> list[str]:
        return [rules.field_name for rules in self.field_rules]

    def get_registered_rules(self) -> dict[str, Any]:
        """Return a description of every registered rule (for debugging)."""
        return _describe(self.field_rules)

    def __len__(self) -> int:
        return len(self.field_rules)


class ValidatorRegistry:
    """Insertion-ordered store of field rule sets for one target type.

    The registry is mutable during configuration only. :meth:`build` returns
    an immutable :class:`RegistrySnapshot` and seals the registry: any
    registration after that raises :class:`RegistryFrozenError`.

    Registering rules for a field that already has a rule set appends to it;
    the map key is the field identity (its name), never the rule content.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        self._field_rule_sets: dict[FieldIdentity, FieldRuleSet] = {}
        self._cross_field_rule_sets: dict[FieldIdentity, FieldRuleSet] = {}
        self._snapshot: RegistrySnapshot | None = None

    @property
    def is_frozen(self) -> bool:
        return self._snapshot is not None

    # ── Registration ─────────────────────────────────────────────

    def field_rule_set(self, identity: FieldIdentity) -> FieldRuleSet:
        """Return the rule set for *identity*, creating it on first use."""
        self._ensure_mutable(identity)
        rule_set = self._field_rule_sets.get(identity)
        if rule_set is None:
            rule_set = FieldRuleSet(identity=identity)
            self._field_rule_sets[identity] = rule_set
            logger.debug(
                "Registered field %s on %s", identity.name, self.name or "<anonymous>"
            )
        return rule_set

    def add_constraint(
        self, identity: FieldIdentity, constraint: Constraint[Any]
    ) -> None:
        """Append *constraint* to the field's list, keeping call order."""
        self.field_rule_set(identity).add_constraint(constraint)
        logger.debug("Added %s constraint to %s", constraint.code.value, identity.name)

    def add_cross_field_check(
        self, identity: FieldIdentity, check: CrossFieldCheck[Any, Any]
    ) -> None:
        """Append a whole-object check under the field's identity."""
        rule_set = self.field_rule_set(identity)
        rule_set.add_cross_field_check(check)
        self._cross_field_rule_sets.setdefault(identity, rule_set)
        logger.debug(
            "Added %s cross-field check to %s", check.code.value, identity.name
        )

    def _ensure_mutable(self, identity: FieldIdentity) -> None:
        if self._snapshot is not None:
            raise RegistryFrozenError(identity.name)

    # ── Freezing ─────────────────────────────────────────────────

    def build(self) -> RegistrySnapshot:
        """Seal the registry and return its immutable snapshot (idempotent)."""
        if self._snapshot is None:
            self._snapshot = RegistrySnapshot(
                field_rules=tuple(r.freeze() for r in self._field_rule_sets.values()),
                cross_field_rules=tuple(
                    r.freeze() for r in self._cross_field_rule_sets.values()
                ),
                name=self.name,
            )
            logger.debug(
                "Built registry snapshot for %s: %d field(s), %d cross-field",
                self.name or "<anonymous>",
                len(self._snapshot.field_rules),
                len(self._snapshot.cross_field_rules),
            )
        return self._snapshot

    # ── Introspection ────────────────────────────────────────────

    def field_names(self) -> list[str]:
        return [identity.name for identity in self._field_rule_sets]

    def get_registered_rules(self) -> dict[str, Any]:
        """Return a description of every registered rule (for debugging)."""
        return _describe(list(self._field_rule_sets.values()))

    def __len__(self) -> int:
        return len(self._field_rule_sets)


__all__ = ["RegistrySnapshot", "ValidatorRegistry"]
