"""ValidationEngine: collect-all and fail-fast execution over a snapshot."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..validation.result import SUCCESS, Failure, ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..validation.result import ValidationErrorDetail
    from .field import FrozenFieldRules
    from .registry import RegistrySnapshot

logger = logging.getLogger(__name__)


def deduplicate(errors: Iterable[ValidationErrorDetail]) -> list[ValidationErrorDetail]:
    """Keep the first error of each ``(field_name, code, message)`` triple."""
    seen: set[tuple[Any, ...]] = set()
    unique: list[ValidationErrorDetail] = []
    for detail in errors:
        key = detail.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(detail)
    return unique


class ValidationEngine:
    """Walks a :class:`RegistrySnapshot` against one object per call.

    Evaluation order, in both modes:

    1. fields in registration order, each field's constraints in
       registration order;
    2. then fields carrying cross-field checks, in the order they received
       their first check, each field's checks in registration order.

    The engine holds only the immutable snapshot, so a single instance can
    serve concurrent callers without locking. Predicate exceptions are not
    caught.
    """

    def __init__(self, snapshot: RegistrySnapshot) -> None:
        self._snapshot = snapshot

    @property
    def snapshot(self) -> RegistrySnapshot:
        return self._snapshot

    def validate(self, obj: Any) -> ValidationResult:
        """Collect every distinct failure for *obj*."""
        errors = deduplicate(self._iter_errors(obj))
        result = ValidationResult.from_errors(errors)
        logger.debug(
            "Validated %s: %s",
            type(obj).__name__,
            f"{len(errors)} error(s)" if errors else "valid",
        )
        return result

    def validate_first(self, obj: Any) -> ValidationResult:
        """Return on the first failure for *obj*, or ``Success``.

        Within a field, evaluation stops at the first failing constraint: that
        error is the head of the field's locally deduplicated error list, and
        it is also the first error :meth:`validate` would report.
        """
        for detail in self._iter_errors(obj):
            logger.debug("Validated %s (fail-fast): %s", type(obj).__name__, detail)
            return Failure((detail,))
        logger.debug("Validated %s (fail-fast): valid", type(obj).__name__)
        return SUCCESS

    # ── Evaluation ───────────────────────────────────────────────

    def _iter_errors(self, obj: Any) -> Iterator[ValidationErrorDetail]:
        """Lazily yield failures in evaluation order (duplicates included)."""
        for rules in self._snapshot.field_rules:
            yield from self._field_errors(rules, obj)
        for rules in self._snapshot.cross_field_rules:
            yield from self._cross_field_errors(rules, obj)

    @staticmethod
    def _field_errors(
        rules: FrozenFieldRules, obj: Any
    ) -> Iterator[ValidationErrorDetail]:
        if not rules.constraints:
            return
        value = rules.identity.read(obj)
        for constraint in rules.constraints:
            detail = constraint.evaluate(value, rules.field_name)
            if detail is not None:
                yield detail

    @staticmethod
    def _cross_field_errors(
        rules: FrozenFieldRules, obj: Any
    ) -> Iterator[ValidationErrorDetail]:
        if not rules.cross_field_checks:
            return
        value = rules.identity.read(obj)
        for check in rules.cross_field_checks:
            detail = check.evaluate(obj, value, rules.field_name)
            if detail is not None:
                yield detail


__all__ = ["ValidationEngine", "deduplicate"]
