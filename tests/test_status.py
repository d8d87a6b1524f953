"""Tests for lease status determination"""

from leasecheck.models import LeaseOverride
from leasecheck.status import (
    APPEARS_LEASED,
    APPEARS_LEASED_PUGH,
    APPEARS_OPEN,
    determine_status,
    grantor_signature,
)

TRACT_KEY = "T1"


def lease(make_event, doc_id, recorded, grantors=("Smith",), **fields):
    return make_event(instrument_type="OGL", doc_id=doc_id, recorded=recorded,
                      grantors=list(grantors), grantees=["Operator LLC"], **fields)


class TestHbpFallback:

    def test_without_overrides(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01")]
        assert determine_status(events, TRACT_KEY, True) == APPEARS_LEASED
        assert determine_status(events, TRACT_KEY, False) == APPEARS_OPEN
        assert determine_status(events, TRACT_KEY, True, {}) == APPEARS_LEASED


class TestOverrides:

    def test_producing_lease(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01")]
        overrides = {"L1": LeaseOverride(production_present=True)}
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_LEASED

    def test_pugh_limited(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01")]
        overrides = {"L1": LeaseOverride(production_present=True, depth_pugh=True)}
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_LEASED_PUGH

    def test_overrides_replace_hbp(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01")]
        overrides = {"L1": LeaseOverride(production_present=False)}
        assert determine_status(events, TRACT_KEY, True, overrides) == APPEARS_OPEN

    def test_later_non_top_lease_expires_earlier(self, make_event):
        events = [
            lease(make_event, "L2", "2005-01-01", grantors=("SMITH ",)),
            lease(make_event, "L1", "1990-01-01"),
        ]
        overrides = {
            "L1": LeaseOverride(production_present=True),
            "L2": LeaseOverride(top_lease=False),
        }
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_OPEN

    def test_top_lease_keeps_earlier_alive(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01"), lease(make_event, "L2", "2005-01-01")]
        overrides = {
            "L1": LeaseOverride(production_present=True),
            "L2": LeaseOverride(top_lease=True),
        }
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_LEASED

    def test_unknown_top_lease_keeps_earlier_alive(self, make_event):
        events = [lease(make_event, "L1", "1990-01-01"), lease(make_event, "L2", "2005-01-01")]
        overrides = {
            "L1": LeaseOverride(production_present=True),
            "L2": LeaseOverride(production_present=False),
        }
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_LEASED

    def test_different_grantors_not_grouped(self, make_event):
        events = [
            lease(make_event, "L1", "1990-01-01", grantors=("Jones",)),
            lease(make_event, "L2", "2005-01-01"),
        ]
        overrides = {
            "L1": LeaseOverride(production_present=True),
            "L2": LeaseOverride(top_lease=False),
        }
        assert determine_status(events, TRACT_KEY, False, overrides) == APPEARS_LEASED

    def test_only_matching_leases_count(self, make_event):
        events = [
            lease(make_event, "L1", "1990-01-01", tracts=[{"trs": "t5", "sec": "5"}]),
            make_event(instrument_type="wd", doc_id="D1", recorded="1991-01-01"),
        ]
        overrides = {
            "L1": LeaseOverride(production_present=True),
            "D1": LeaseOverride(production_present=True),
        }
        assert determine_status(events, TRACT_KEY, True, overrides) == APPEARS_OPEN


def test_grantor_signature(make_event):
    event = make_event(grantors=["Ann", "BOB "])
    assert grantor_signature(event) == "ann|bob"
