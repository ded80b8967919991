"""FieldIdentity and FieldRuleSet: the per-field bookkeeping of a validator."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..constraints.constraint import Constraint, CrossFieldCheck


def attribute_accessor(name: str) -> Callable[[Any], Any]:
    """Read *name* from the target: a key for mappings, an attribute otherwise."""

    def _access(obj: Any) -> Any:
        if isinstance(obj, Mapping):
            return obj.get(name)
        return getattr(obj, name)

    _access.__name__ = f"access_{name}"
    return _access


@dataclass(frozen=True)
class FieldIdentity:
    """Stable handle for "field *name* of the target type".

    Equality and hashing use ``name`` only, so two registrations for the
    same field always land in the same rule set regardless of which
    accessor callable they were made with.
    """

    name: str
    accessor: Callable[[Any], Any] = field(compare=False, repr=False)

    @classmethod
    def of(
        cls, name: str, accessor: Callable[[Any], Any] | None = None
    ) -> FieldIdentity:
        if not name:
            from ..primitives.exceptions import ConfigurationError

            raise ConfigurationError("Field name must be a non-empty string")
        return cls(name=name, accessor=accessor or attribute_accessor(name))

    def read(self, obj: Any) -> Any:
        return self.accessor(obj)


@dataclass(frozen=True)
class FrozenFieldRules:
    """Immutable view of a :class:`FieldRuleSet`, as held by a snapshot."""

    identity: FieldIdentity
    constraints: tuple[Constraint[Any], ...]
    cross_field_checks: tuple[CrossFieldCheck[Any, Any], ...]

    @property
    def field_name(self) -> str:
        return self.identity.name


@dataclass
class FieldRuleSet:
    """Ordered constraints and cross-field checks of one field.

    Built incrementally during configuration: every addition appends, none
    replaces. Identical constraints may be registered twice; duplicate
    failures are collapsed later, when results are aggregated.
    """

    identity: FieldIdentity
    constraints: list[Constraint[Any]] = field(default_factory=list)
    cross_field_checks: list[CrossFieldCheck[Any, Any]] = field(default_factory=list)

    @property
    def field_name(self) -> str:
        return self.identity.name

    def add_constraint(self, constraint: Constraint[Any]) -> None:
        self.constraints.append(constraint)

    def add_cross_field_check(self, check: CrossFieldCheck[Any, Any]) -> None:
        self.cross_field_checks.append(check)

    def freeze(self) -> FrozenFieldRules:
        return FrozenFieldRules(
            identity=self.identity,
            constraints=tuple(self.constraints),
            cross_field_checks=tuple(self.cross_field_checks),
        )
