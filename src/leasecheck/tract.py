"""
Tract matching.

Tract identifiers on runsheets are formatted inconsistently, so matching is
a loose substring test on both the township-range-section key and the
section number. Callers needing precision should pre-filter events.
"""

from typing import Iterable, List

from .models import InstrumentEvent, TractDescriptor


def descriptor_matches(descriptor: TractDescriptor, tract_key: str) -> bool:
    """True if both the TRS key and the section appear in tract_key"""
    trs = (descriptor.trs or "").lower()
    sec = descriptor.sec or ""
    if not trs or not sec:
        return False
    # TRS compares case-insensitively, the section exactly as supplied
    return trs in tract_key.lower() and sec in tract_key


def matches(event: InstrumentEvent, tract_key: str) -> bool:
    """True if any of the event's tracts matches tract_key"""
    return any(descriptor_matches(t, tract_key) for t in event.tracts)


def filter_events(events: Iterable[InstrumentEvent], tract_key: str) -> List[InstrumentEvent]:
    return [e for e in events if matches(e, tract_key)]
