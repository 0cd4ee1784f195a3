"""Entry ordering strategies."""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..config.model import Order
from ..domain.catalog import Entry


def identity_key(entry: Entry) -> tuple:
    # Absent context sorts before any concrete context, "" included
    return (entry.context is not None, entry.context or "", entry.id)


def location_key(entry: Entry) -> tuple:
    # Entries without a reference sort before every located entry
    reference = entry.first_reference
    if reference is None:
        return (0,)
    return (1, reference.file, reference.line or 0)


_SORT_KEYS: Dict[Order, Callable[[Entry], Any]] = {
    Order.BY_IDENTITY: identity_key,
    Order.BY_LOCATION: location_key,
}


def order_entries(entries: Sequence[Entry], order: Order = Order.PRESERVE) -> List[Entry]:
    """Return ``entries`` arranged by the given strategy.

    Sorting is stable, so entries with equal keys keep their merge order.
    Obsolete entries are ordered among themselves and placed after all
    regular entries.
    """
    order = Order(order)
    active = [entry for entry in entries if not entry.obsolete]
    obsolete = [entry for entry in entries if entry.obsolete]

    key = _SORT_KEYS.get(order)
    if key is not None:
        active = sorted(active, key=key)
        obsolete = sorted(obsolete, key=key)
    return active + obsolete
