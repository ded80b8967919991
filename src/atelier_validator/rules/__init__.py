"""Ready-made constraints, grouped by the kind of value they check.

Import the group you need::

    from atelier_validator.rules import numeric, strings

    builder.field("age", numeric.min_value(18), numeric.max_value(120))
"""

from __future__ import annotations

from atelier_validator.rules import booleans, common, numeric, sized, strings, temporal

__all__ = ["booleans", "common", "numeric", "sized", "strings", "temporal"]
