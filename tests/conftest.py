import pytest

from leasecheck.ingest import parse_event
from leasecheck.instrument_types import InstrumentTypeNormalizer

TRACT_KEY = "T1"
TRACT = {"trs": "t1", "sec": "1"}


@pytest.fixture(scope="session")
def normalizer():
    return InstrumentTypeNormalizer()


@pytest.fixture
def make_event(normalizer):
    """Build an InstrumentEvent from keyword fields, defaulting to tract T1"""
    def _make(**fields):
        fields.setdefault("instrument_type", "warranty-deed")
        fields.setdefault("tracts", [TRACT])
        return parse_event(fields, normalizer)
    return _make
