"""
Ownership report builder.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .models import ReportRow, ReviewFlag
from .status import hbp_status


@dataclass
class OwnershipReport:
    owners: List[ReportRow]
    flags: List[ReviewFlag]

    def to_dict(self) -> dict:
        return {
            'owners': [row.to_dict() for row in self.owners],
            'flags': [flag.to_dict() for flag in self.flags],
        }


def build_row(owner: str, fraction: float, total_acres: float, status: str) -> ReportRow:
    """Turn one ledger entry into a report row; negative balances count as zero"""
    net_acres = max(0.0, fraction) * total_acres
    percent = (net_acres / total_acres) * 100 if total_acres else 0.0
    return ReportRow(owner=owner, percent=percent, net_acres=net_acres, status=status)


def build_report(
    ledger: Dict[str, float],
    flags: List[ReviewFlag],
    total_acres: float,
    hbp: bool,
    status: Optional[str] = None,
) -> OwnershipReport:
    """
    Build the ranked ownership report.

    Args:
        ledger: Finalized ledger of owner -> fraction of the whole tract
        flags: Review flags from the resolver, passed through unchanged
        total_acres: Gross acreage of the tract
        hbp: Held-by-production flag
        status: Explicit status for every row (default derived from hbp)

    Returns:
        OwnershipReport with rows sorted by net acres, largest first
    """
    if status is None:
        status = hbp_status(hbp)

    rows = [build_row(owner, fraction, total_acres, status) for owner, fraction in ledger.items()]
    # sorted() is stable, so ties keep ledger order
    rows = sorted(rows, key=lambda row: row.net_acres, reverse=True)
    return OwnershipReport(owners=rows, flags=list(flags))
