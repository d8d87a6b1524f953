"""
Lease check service: ingestion, resolution, status and report in one call.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .config import SETTINGS
from .ingest import parse_event, parse_events
from .instrument_types import InstrumentTypeNormalizer
from .models import LeaseOverride
from .report import build_report
from .resolver import resolve
from .rules import Classification, classify
from .status import determine_status

logger = logging.getLogger(__name__)

OverrideInput = Union[LeaseOverride, Mapping[str, Any]]


def coerce_overrides(lease_overrides: Optional[Mapping[str, OverrideInput]]) -> Dict[str, LeaseOverride]:
    """Accept overrides as LeaseOverride objects or plain dicts"""
    overrides = {}
    for key, value in (lease_overrides or {}).items():
        if isinstance(value, LeaseOverride):
            overrides[key] = value
        else:
            overrides[key] = LeaseOverride(
                production_present=bool(value.get('production_present')),
                top_lease=None if value.get('top_lease') is None else bool(value.get('top_lease')),
                boundary_pugh=bool(value.get('boundary_pugh')),
                depth_pugh=bool(value.get('depth_pugh')),
            )
    return overrides


class LeaseChecker:
    """Resolves mineral ownership and lease status for a tract"""

    def __init__(
        self,
        instrument_types_file: Optional[str] = None,
        fuzzy_threshold: Optional[float] = None,
        default_total_acres: Optional[float] = None,
    ):
        """
        Initialize the checker.

        Args:
            instrument_types_file: Path to the instrument type alias YAML
                (default: LEASECHECK_INSTRUMENT_TYPES_FILE or the packaged file)
            fuzzy_threshold: Minimum rapidfuzz ratio for near-miss type labels
            default_total_acres: Acreage used when a run omits total_acres
        """
        self.normalizer = InstrumentTypeNormalizer(instrument_types_file, fuzzy_threshold)
        self.default_total_acres = (
            SETTINGS.DEFAULT_TOTAL_ACRES if default_total_acres is None else default_total_acres
        )

    def classify_event(self, raw_event: Any) -> Classification:
        """Normalize a single event and report which rule it falls under"""
        return classify(parse_event(raw_event, self.normalizer))

    def run(
        self,
        events: Iterable[Any],
        tract_key: str,
        as_of: Optional[str] = None,
        hbp: bool = False,
        total_acres: Optional[float] = None,
        lease_overrides: Optional[Mapping[str, OverrideInput]] = None,
    ) -> Dict[str, Any]:
        """
        Run a lease check for one tract.

        Rows that cannot be normalized are dropped before resolution; they
        still count towards events_count.

        Args:
            events: Raw event dicts or InstrumentEvent objects
            tract_key: Tract identifier the events are matched against
            as_of: Informational as-of date (default: today)
            hbp: Held-by-production flag
            total_acres: Gross acreage (default from settings)
            lease_overrides: Per-lease production / Pugh facts keyed by doc id

        Returns:
            Dictionary with events_count, owners and flags
        """
        events = list(events)
        if as_of is None:
            as_of = date.today().isoformat()
        if total_acres is None:
            total_acres = self.default_total_acres

        logger.info("Running lease check on %d events for tract '%s' as of %s",
                    len(events), tract_key, as_of)

        normalized = parse_events(events, self.normalizer)
        result = resolve(normalized, tract_key)
        status = determine_status(normalized, tract_key, hbp, coerce_overrides(lease_overrides))
        report = build_report(result.ledger, result.flags, total_acres, hbp, status=status)

        return {
            'events_count': len(events),
            **report.to_dict(),
        }
