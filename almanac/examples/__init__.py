"""Example routines run by the ``almanac`` console program.

``EXAMPLES`` maps each command-line name to its routine, in the order
``--list`` prints them.
"""

from __future__ import annotations

from typing import Callable

from almanac.config import Settings
from almanac.examples.calendar_examples import (
    adjusters_example,
    conversions_example,
    election_example,
    field_example,
    formatting_example,
    instant_example,
    local_example,
    months_example,
    payday_example,
    pirate_day_example,
    region_names_example,
    unusual_offsets_example,
    zones_example,
)
from almanac.examples.concurrency_examples import (
    combine_example,
    compose_example,
    coordinate_example,
    future_example,
    handle_example,
    products_example,
    sums_example,
    timing_example,
)

Example = Callable[[Settings], None]

EXAMPLES: dict[str, Example] = {
    "local": local_example,
    "instant": instant_example,
    "zones": zones_example,
    "field": field_example,
    "adjusters": adjusters_example,
    "payday": payday_example,
    "pirate-day": pirate_day_example,
    "formatting": formatting_example,
    "unusual-offsets": unusual_offsets_example,
    "region-names": region_names_example,
    "months": months_example,
    "election": election_example,
    "conversions": conversions_example,
    "sums": sums_example,
    "timing": timing_example,
    "future": future_example,
    "products": products_example,
    "coordinate": coordinate_example,
    "compose": compose_example,
    "combine": combine_example,
    "handle": handle_example,
}

DEFAULT_EXAMPLE = "payday"

__all__ = ["EXAMPLES", "DEFAULT_EXAMPLE", "Example"]
