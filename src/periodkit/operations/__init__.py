"""Operations layer — the pure period algebra.

Every function takes the TemporalContext first (where it needs one) and
returns new Periods; none of them mutate their inputs. ``zoom_out`` and
``zoom_to`` are the only operations that move ``ctx.browsing``.
"""

from periodkit.operations.checks import is_today, is_weekday, is_weekend
from periodkit.operations.combine import merge, split
from periodkit.operations.comparison import contains, is_same, is_same_unit, overlaps
from periodkit.operations.divide import divide
from periodkit.operations.factory import custom_period, period_of, to_period
from periodkit.operations.navigation import go, next_period, previous_period
from periodkit.operations.stable_month import grid_rows, in_real_month, real_month, stable_month
from periodkit.operations.zoom import zoom_in, zoom_out, zoom_to

__all__ = [
    "contains",
    "custom_period",
    "divide",
    "go",
    "grid_rows",
    "in_real_month",
    "is_same",
    "is_same_unit",
    "is_today",
    "is_weekday",
    "is_weekend",
    "merge",
    "next_period",
    "overlaps",
    "period_of",
    "previous_period",
    "real_month",
    "split",
    "stable_month",
    "to_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
