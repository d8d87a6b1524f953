"""
Lease Check Package

Resolves current mineral ownership of a tract from a chain of normalized
title instruments, and flags what needs a landman's review.
"""

from .exceptions import (
    LeaseCheckError,
    EventParseError,
    InvalidRequestError,
    ConfigurationError
)
from .models import (
    InstrumentType,
    InstrumentEvent,
    TractDescriptor,
    MineralReservation,
    LifeEstate,
    ReviewFlag,
    LeaseOverride,
    ReportRow
)
from .fraction_utils import parse_fraction
from .tract import matches
from .rules import Action, classify
from .resolver import resolve, finalize_ledger
from .report import build_report
from .checker import LeaseChecker

__version__ = "1.0.0"
__all__ = [
    "LeaseCheckError",
    "EventParseError",
    "InvalidRequestError",
    "ConfigurationError",
    "InstrumentType",
    "InstrumentEvent",
    "TractDescriptor",
    "MineralReservation",
    "LifeEstate",
    "ReviewFlag",
    "LeaseOverride",
    "ReportRow",
    "parse_fraction",
    "matches",
    "Action",
    "classify",
    "resolve",
    "finalize_ledger",
    "build_report",
    "LeaseChecker",
]
