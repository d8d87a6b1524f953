"""
Ownership ledger resolver.

Replays a tract's instrument events in chronological order against an
in-memory ledger of owner name -> fraction of the whole tract, collecting
review flags for anything it cannot resolve. Each call owns its own ledger
and flag list; nothing is shared between runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .fraction_utils import is_negligible, parse_fraction
from .models import InstrumentEvent, ReviewFlag
from .rules import Action, classify
from .tract import filter_events

logger = logging.getLogger(__name__)

Ledger = Dict[str, float]


@dataclass
class ResolutionContext:
    """Mutable state of one resolution run"""
    ledger: Ledger = field(default_factory=dict)
    flags: List[ReviewFlag] = field(default_factory=list)

    def flag(self, event: InstrumentEvent, note: str):
        self.flags.append(ReviewFlag(note=note, doc_id=event.doc_id))

    def adjust(self, owner: str, delta: float):
        self.ledger[owner] = self.ledger.get(owner, 0.0) + delta


@dataclass
class ResolutionResult:
    ledger: Ledger
    flags: List[ReviewFlag]
    events_applied: int = 0


def sort_events(events: Iterable[InstrumentEvent]) -> List[InstrumentEvent]:
    """Stable ascending sort on recorded date, falling back to effective date"""
    return sorted(events, key=lambda e: e.sort_key)


def transfer_all_interest(context: ResolutionContext, event: InstrumentEvent):
    """Move each grantor's whole balance to the grantees in equal shares"""
    for grantor in event.grantors:
        balance = context.ledger.get(grantor, 0.0)
        if balance > 0 and event.grantees:
            share = balance / len(event.grantees)
            context.ledger[grantor] = 0.0
            for grantee in event.grantees:
                context.adjust(grantee, share)
        else:
            context.flag(event, f"Conveys all interest but unknown grantor share for {grantor}")


def transfer_fraction(context: ResolutionContext, event: InstrumentEvent, fraction: float):
    """
    Apply a fraction of the whole tract.

    Grantors and grantees are two independent distributions: grantors lose
    fraction / len(grantors) each, grantees gain fraction / len(grantees)
    each. Total ledger mass is not conserved when one side is empty, and
    grantor balances may go negative.
    """
    if event.grantors:
        per_grantor = fraction / len(event.grantors)
        for grantor in event.grantors:
            context.adjust(grantor, -per_grantor)
    if event.grantees:
        per_grantee = fraction / len(event.grantees)
        for grantee in event.grantees:
            context.adjust(grantee, per_grantee)


def apply_event(context: ResolutionContext, event: InstrumentEvent) -> bool:
    """
    Apply one tract-matched event to the context.

    Returns:
        True if the event reached the transfer step with something to apply
    """
    classification = classify(event)

    if classification.action is Action.FLAG_REVIEW:
        context.flag(event, classification.note)
        return False
    if classification.action is not Action.TRANSFER:
        logger.debug("Event %s ignored by rule '%s'", event.doc_id, classification.rule)
        return False

    if event.conveys_all_interest:
        transfer_all_interest(context, event)
        return True

    fraction = parse_fraction(event.fraction_whole)
    if fraction is not None:
        transfer_fraction(context, event, fraction)
        return True

    # Neither all-interest nor a readable fraction: no change, no flag
    logger.debug("Event %s has no interpretable conveyance", event.doc_id)
    return False


def finalize_ledger(ledger: Ledger) -> Ledger:
    """Return a copy of the ledger without negligible balances"""
    return {owner: value for owner, value in ledger.items() if not is_negligible(value)}


def resolve(events: Iterable[InstrumentEvent], tract_key: str) -> ResolutionResult:
    """
    Resolve current mineral ownership of a tract.

    Events are sorted, restricted to those matching tract_key, classified
    and replayed. Nothing is raised for ambiguous chains; problems are
    reported as review flags.

    Args:
        events: Normalized instrument events (any order)
        tract_key: Tract identifier, e.g. "12N-5W-14"

    Returns:
        ResolutionResult with the finalized ledger and flags in append order
    """
    context = ResolutionContext()
    applied = 0

    for event in filter_events(sort_events(events), tract_key):
        if apply_event(context, event):
            applied += 1

    ledger = finalize_ledger(context.ledger)
    logger.info(
        "Resolved tract '%s': %d transfers applied, %d owners, %d flags",
        tract_key, applied, len(ledger), len(context.flags)
    )
    return ResolutionResult(ledger=ledger, flags=context.flags, events_applied=applied)
