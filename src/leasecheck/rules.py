"""
Instrument classifier rules.

An ordered table of (predicate, action) rules. classify() walks the table
and the first rule whose predicate holds decides what the resolver does
with the event.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .models import CONVEYANCE_TYPES, InstrumentEvent, InstrumentType

LIFE_ESTATE_NOTE = "Life estate detected; confirm termination status"


class Action(str, Enum):
    IGNORE = "ignore"
    RESERVED = "reserve-and-ignore"
    FLAG_REVIEW = "flag-for-review"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Callable[[InstrumentEvent], bool]
    action: Action
    note: Optional[str] = None


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one event"""
    action: Action
    rule: str
    note: Optional[str] = None


def is_encumbrance(event: InstrumentEvent) -> bool:
    return event.instrument_type in (
        InstrumentType.EASEMENT,
        InstrumentType.MORTGAGE,
        InstrumentType.SURFACE_ONLY,
    )


def is_lease(event: InstrumentEvent) -> bool:
    # Leases never change mineral ownership; lease status is applied at report time
    return event.instrument_type is InstrumentType.OIL_AND_GAS_LEASE


def has_life_estate(event: InstrumentEvent) -> bool:
    return event.instrument_type is InstrumentType.LIFE_ESTATE or event.life_estate.present


def is_reserved_conveyance(event: InstrumentEvent) -> bool:
    return event.mineral_reservation.reserved and event.instrument_type in CONVEYANCE_TYPES


RULES: Tuple[Rule, ...] = (
    Rule("encumbrance", is_encumbrance, Action.IGNORE),
    Rule("oil-and-gas-lease", is_lease, Action.IGNORE),
    Rule("life-estate", has_life_estate, Action.FLAG_REVIEW, LIFE_ESTATE_NOTE),
    Rule("mineral-reservation", is_reserved_conveyance, Action.RESERVED),
    Rule("transfer", lambda event: True, Action.TRANSFER),
)


def classify(event: InstrumentEvent, rules: Tuple[Rule, ...] = RULES) -> Classification:
    """
    Classify an event against the rule table.

    Args:
        event: Normalized instrument event
        rules: Ordered rule table (first match wins)

    Returns:
        Classification naming the action and the rule that fired
    """
    for rule in rules:
        if rule.predicate(event):
            return Classification(action=rule.action, rule=rule.name, note=rule.note)
    # Only reachable with a custom table lacking a catch-all
    return Classification(action=Action.IGNORE, rule="none")
