"""ValidatorBuilder / FieldRuleBuilder: configuration-phase API."""

from __future__ import annotations

import dataclasses
import logging
import operator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typing_extensions import Self

from ..constraints.constraint import Constraint, CrossFieldCheck
from ..primitives.exceptions import ConfigurationError
from ..validation.codes import ErrorCode
from .field import FieldIdentity
from .registry import ValidatorRegistry
from .validator import Validator

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)


class FieldRuleBuilder(Generic[T, R]):
    """Attaches rules to one field of the target type.

    Every method appends to the field's existing rule set and returns the
    builder, so calls chain::

        builder.field("password").add(not_blank(), strong_password())
        builder.field("confirm_password").is_equal_to(lambda u: u.password)
    """

    def __init__(self, registry: ValidatorRegistry, identity: FieldIdentity) -> None:
        self._registry = registry
        self._identity = identity

    @property
    def field_name(self) -> str:
        return self._identity.name

    # ── Single-value rules ───────────────────────────────────────

    def add(self, *constraints: Constraint[R]) -> Self:
        """Append ready-made constraints (e.g. from ``atelier_validator.rules``)."""
        for constraint in constraints:
            self._registry.add_constraint(self._identity, constraint)
        return self

    def constraint(
        self,
        hint: str,
        predicate: Callable[[R], bool],
        code: ErrorCode = ErrorCode.CUSTOM_ERROR,
    ) -> Self:
        """Low-level registration of a predicate with its hint and code."""
        return self.add(Constraint(hint=hint, code=code, predicate=predicate))

    def custom(
        self,
        predicate: Callable[[R], bool],
        message: str | None = None,
        code: ErrorCode = ErrorCode.CUSTOM_ERROR,
    ) -> Self:
        return self.constraint(
            hint=message or f"{self.field_name} validation failed",
            predicate=predicate,
            code=code,
        )

    # ── Whole-object rules ───────────────────────────────────────

    def cross_field(
        self,
        selector: Callable[[T], R],
        compare: Callable[[R, R], bool],
        message: str,
        code: ErrorCode = ErrorCode.CROSS_FIELD_ERROR,
        *,
        field_name: str | None = None,
    ) -> Self:
        """Compare this field's value with ``selector(obj)``."""
        check: CrossFieldCheck[T, R] = CrossFieldCheck(
            selector=selector,
            compare=compare,
            hint=message,
            code=code,
            field_name=field_name,
        )
        self._registry.add_cross_field_check(self._identity, check)
        return self

    def is_equal_to(
        self, selector: Callable[[T], R], message: str | None = None
    ) -> Self:
        """Require this field to equal ``selector(obj)``, e.g. a password confirmation."""
        return self.cross_field(
            selector, operator.eq, message or "Must match the expected value"
        )

    # ── Composition ──────────────────────────────────────────────

    def apply(self, configure: Callable[[Self], Any]) -> Self:
        """Run a configuration callback against this builder."""
        configure(self)
        return self


class ValidatorBuilder(Generic[T]):
    """Collects field rules for ``T`` and produces an immutable :class:`Validator`.

    Usage::

        builder = ValidatorBuilder(User)
        builder.field("name", not_blank(), min_length(2))
        builder.field("age", configure=lambda f: f.add(min_value(18), max_value(120)))
        user_validator = builder.build()

    ``build()`` freezes the underlying registry; later ``field()`` rule
    additions raise :class:`RegistryFrozenError`.
    """

    def __init__(
        self, target_type: type[T] | None = None, *, name: str | None = None
    ) -> None:
        self.target_type = target_type
        if name is None and target_type is not None:
            name = target_type.__name__
        self._registry = ValidatorRegistry(name=name)

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    def field(
        self,
        name: str,
        *constraints: Constraint[Any],
        accessor: Callable[[T], Any] | None = None,
        configure: Callable[[FieldRuleBuilder[T, Any]], Any] | None = None,
    ) -> FieldRuleBuilder[T, Any]:
        """Get-or-create the rule set of field *name* and attach rules to it."""
        if accessor is None:
            self._check_field_name(name)
        identity = FieldIdentity.of(name, accessor)
        self._registry.field_rule_set(identity)
        field_builder: FieldRuleBuilder[T, Any] = FieldRuleBuilder(
            self._registry, identity
        )
        field_builder.add(*constraints)
        if configure is not None:
            field_builder.apply(configure)
        return field_builder

    def build(self) -> Validator[T]:
        snapshot = self._registry.build()
        logger.debug("Built validator %s", snapshot.name or "<anonymous>")
        return Validator(snapshot, self.target_type)

    def _check_field_name(self, name: str) -> None:
        """Reject names that the declared target type cannot possibly have."""
        target = self.target_type
        if target is None:
            return
        known: set[str] = set()
        if dataclasses.is_dataclass(target):
            known.update(f.name for f in dataclasses.fields(target))
        known.update(getattr(target, "model_fields", {}) or {})
        if known and name not in known and not hasattr(target, name):
            msg = (
                f"{target.__name__} has no field '{name}'. "
                f"Known fields: {', '.join(sorted(known))}"
            )
            raise ConfigurationError(msg)


def build_validator(
    target_type: type[T] | None,
    configure: Callable[[ValidatorBuilder[T]], Any],
    *,
    name: str | None = None,
) -> Validator[T]:
    """Create, configure and build a validator in one call.

    Usage::

        def rules(v: ValidatorBuilder[User]) -> None:
            v.field("name", not_blank())
            v.field("email", email())

        user_validator = build_validator(User, rules)
    """
    builder: ValidatorBuilder[T] = ValidatorBuilder(target_type, name=name)
    configure(builder)
    return builder.build()


__all__ = ["FieldRuleBuilder", "ValidatorBuilder", "build_validator"]
