"""
Ingestion of raw runsheet events into immutable InstrumentEvent records.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import EventParseError
from .instrument_types import InstrumentTypeNormalizer
from .models import InstrumentEvent, LifeEstate, MineralReservation, TractDescriptor

logger = logging.getLogger(__name__)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _names(raw: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = raw.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value.strip() else ()
    if not isinstance(value, (list, tuple)):
        raise EventParseError(f"'{key}' must be a list of names, got {type(value).__name__}")
    return tuple(str(name) for name in value if name is not None)


def _tracts(raw: Dict[str, Any]) -> Tuple[TractDescriptor, ...]:
    value = raw.get('tracts')
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        raise EventParseError(f"'tracts' must be a list, got {type(value).__name__}")

    tracts = []
    for entry in value:
        if isinstance(entry, TractDescriptor):
            tracts.append(entry)
        elif isinstance(entry, dict):
            tracts.append(TractDescriptor(
                trs=_optional_str(entry.get('trs')) or "",
                sec=_optional_str(entry.get('sec')) or "",
            ))
    return tuple(tracts)


def parse_event(raw: Any, normalizer: InstrumentTypeNormalizer) -> InstrumentEvent:
    """
    Normalize one raw event dict into an InstrumentEvent.

    Accepts the runsheet spellings "recorded" and "dated" for
    recorded_date and effective_date.

    Args:
        raw: Event dict produced by the extraction step
        normalizer: Instrument type normalizer

    Returns:
        InstrumentEvent

    Raises:
        EventParseError: If the row cannot be normalized
    """
    if isinstance(raw, InstrumentEvent):
        return raw
    if not isinstance(raw, dict):
        raise EventParseError(f"Event must be an object, got {type(raw).__name__}")

    raw_type = _optional_str(raw.get('instrument_type')) or ""

    reservation = raw.get('mineral_reservation')
    life_estate = raw.get('life_estate')

    return InstrumentEvent(
        instrument_type=normalizer.normalize(raw_type),
        recorded_date=_optional_str(raw.get('recorded_date') or raw.get('recorded')),
        effective_date=_optional_str(raw.get('effective_date') or raw.get('dated')),
        grantors=_names(raw, 'grantors'),
        grantees=_names(raw, 'grantees'),
        conveys_all_interest=bool(raw.get('conveys_all_interest')),
        fraction_whole=_optional_str(raw.get('fraction_whole')),
        mineral_reservation=MineralReservation(
            reserved=bool(reservation.get('reserved')) if isinstance(reservation, dict) else False
        ),
        life_estate=LifeEstate(
            present=bool(life_estate.get('present')) if isinstance(life_estate, dict) else False
        ),
        tracts=_tracts(raw),
        doc_id=_optional_str(raw.get('doc_id') or raw.get('recording') or raw.get('id')),
        raw_type=raw_type,
    )


def parse_events(rows: Iterable[Any], normalizer: InstrumentTypeNormalizer) -> List[InstrumentEvent]:
    """
    Normalize a batch of raw events, omitting rows that fail.

    Skipped rows are logged and never reach the resolver.
    """
    events = []
    for index, raw in enumerate(rows):
        try:
            events.append(parse_event(raw, normalizer))
        except EventParseError as e:
            logger.warning("Skipping event %d: %s", index, e)
    return events
