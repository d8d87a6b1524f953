"""
Lease status for a tract.

Without overrides the status follows the caller's held-by-production flag.
With per-lease overrides it is derived from the tract's leases: a newer lease
from the same grantors that is not a top lease expires the earlier ones, and
any surviving lease with production keeps the tract leased, possibly limited
by a Pugh clause.
"""

from typing import Dict, Iterable, List, Mapping, Optional

from .models import InstrumentEvent, LeaseOverride
from .resolver import sort_events
from .rules import is_lease
from .tract import matches

APPEARS_LEASED = "Appears Leased"
APPEARS_LEASED_PUGH = "Appears Leased (Pugh-limited)"
APPEARS_OPEN = "Appears Open"


def hbp_status(hbp: bool) -> str:
    return APPEARS_LEASED if hbp else APPEARS_OPEN


def grantor_signature(event: InstrumentEvent) -> str:
    return "|".join(event.grantors).lower().strip()


def expired_leases(leases: List[InstrumentEvent], overrides: Mapping[str, LeaseOverride]) -> set:
    """Lease keys superseded by a later, non-top lease from the same grantors"""
    by_grantor: Dict[str, List[InstrumentEvent]] = {}
    for lease in leases:
        by_grantor.setdefault(grantor_signature(lease), []).append(lease)

    expired = set()
    for group in by_grantor.values():
        group = sort_events(group)
        latest = overrides.get(group[-1].lease_key)
        if latest is not None and latest.top_lease is False:
            expired.update(lease.lease_key for lease in group[:-1])
    return expired


def determine_status(
    events: Iterable[InstrumentEvent],
    tract_key: str,
    hbp: bool,
    lease_overrides: Optional[Mapping[str, LeaseOverride]] = None,
) -> str:
    """
    Decide the lease status applied to every report row.

    Args:
        events: Normalized instrument events
        tract_key: Tract identifier
        hbp: Held-by-production flag from the caller
        lease_overrides: Per-lease facts keyed by lease doc id

    Returns:
        Status string
    """
    if not lease_overrides:
        return hbp_status(hbp)

    leases = [e for e in sort_events(events) if matches(e, tract_key) and is_lease(e)]
    expired = expired_leases(leases, lease_overrides)

    producing = False
    pugh_limited = False
    for lease in leases:
        key = lease.lease_key
        if not key or key in expired:
            continue
        override = lease_overrides.get(key)
        if override is not None and override.production_present:
            producing = True
            if override.boundary_pugh or override.depth_pugh:
                pugh_limited = True

    if not producing:
        return APPEARS_OPEN
    return APPEARS_LEASED_PUGH if pugh_limited else APPEARS_LEASED
