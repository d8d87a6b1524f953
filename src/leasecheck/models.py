"""
Data models for lease check resolution.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Tuple


class InstrumentType(str, Enum):
    """Closed set of instrument types the resolver understands"""
    WARRANTY_DEED = "warranty-deed"
    QUITCLAIM_DEED = "quitclaim-deed"
    DEED = "deed"
    TRUST_DEED = "trust-deed"
    PERSONAL_REPRESENTATIVE_DEED = "personal-representative-deed"
    MINERAL_DEED = "mineral-deed"
    PARTIAL_RELEASE_MINERAL_DEED = "partial-release-mineral-deed"
    OIL_AND_GAS_LEASE = "oil-and-gas-lease"
    LIFE_ESTATE = "life-estate"
    EASEMENT = "easement"
    MORTGAGE = "mortgage"
    SURFACE_ONLY = "surface-only"
    OTHER = "other"


# Deeds that convey surface only when they carry a mineral reservation
CONVEYANCE_TYPES = frozenset({
    InstrumentType.WARRANTY_DEED,
    InstrumentType.QUITCLAIM_DEED,
    InstrumentType.DEED,
    InstrumentType.TRUST_DEED,
    InstrumentType.PERSONAL_REPRESENTATIVE_DEED,
    InstrumentType.PARTIAL_RELEASE_MINERAL_DEED,
})


@dataclass(frozen=True)
class TractDescriptor:
    """Township-range-section key plus section number of one tract"""
    trs: str = ""
    sec: str = ""


@dataclass(frozen=True)
class MineralReservation:
    reserved: bool = False


@dataclass(frozen=True)
class LifeEstate:
    present: bool = False


@dataclass(frozen=True)
class InstrumentEvent:
    """One recorded instrument affecting a tract, already normalized"""
    instrument_type: InstrumentType
    recorded_date: Optional[str] = None
    effective_date: Optional[str] = None
    grantors: Tuple[str, ...] = ()
    grantees: Tuple[str, ...] = ()
    conveys_all_interest: bool = False
    fraction_whole: Optional[str] = None
    mineral_reservation: MineralReservation = field(default_factory=MineralReservation)
    life_estate: LifeEstate = field(default_factory=LifeEstate)
    tracts: Tuple[TractDescriptor, ...] = ()
    doc_id: Optional[str] = None
    raw_type: str = ""

    @property
    def sort_key(self) -> str:
        # Lexical, not a true date sort; undated events sort first
        return self.recorded_date or self.effective_date or ""

    @property
    def lease_key(self) -> str:
        """Identifier used to look up per-lease overrides"""
        if self.doc_id:
            return self.doc_id
        return f"{self.effective_date or ''}-{self.recorded_date or ''}"


@dataclass(frozen=True)
class ReviewFlag:
    """An advisory note about something the resolver could not decide"""
    note: str
    doc_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {"doc_id": self.doc_id, "note": self.note}


@dataclass(frozen=True)
class LeaseOverride:
    """Analyst-supplied facts about one lease"""
    production_present: bool = False
    # None means unknown; only an explicit False expires earlier leases
    top_lease: Optional[bool] = None
    boundary_pugh: bool = False
    depth_pugh: bool = False


@dataclass
class ReportRow:
    owner: str
    percent: float
    net_acres: float
    status: str

    def to_dict(self) -> dict:
        return asdict(self)
