"""Registration and execution engine."""

from __future__ import annotations

from .builder import FieldRuleBuilder, ValidatorBuilder, build_validator
from .executor import ValidationEngine, deduplicate
from .field import FieldIdentity, FieldRuleSet, FrozenFieldRules, attribute_accessor
from .registry import RegistrySnapshot, ValidatorRegistry
from .validator import Validator

__all__ = [
    "FieldIdentity",
    "FieldRuleBuilder",
    "FieldRuleSet",
    "FrozenFieldRules",
    "RegistrySnapshot",
    "ValidationEngine",
    "Validator",
    "ValidatorBuilder",
    "ValidatorRegistry",
    "attribute_accessor",
    "build_validator",
    "deduplicate",
]
