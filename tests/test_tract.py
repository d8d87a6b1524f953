"""Tests for the tract matcher"""

from leasecheck.models import TractDescriptor
from leasecheck.tract import descriptor_matches, filter_events, matches


class TestDescriptorMatches:

    def test_trs_is_case_insensitive(self):
        assert descriptor_matches(TractDescriptor(trs="12N-5W", sec="14"), "12n-5w sec 14")

    def test_section_is_case_sensitive(self):
        assert descriptor_matches(TractDescriptor(trs="t1", sec="A"), "T1 A")
        assert not descriptor_matches(TractDescriptor(trs="t1", sec="a"), "T1 A")

    def test_both_parts_required(self):
        assert not descriptor_matches(TractDescriptor(trs="t1", sec="9"), "T1-1")
        assert not descriptor_matches(TractDescriptor(trs="t2", sec="1"), "T1-1")

    def test_empty_parts_never_match(self):
        assert not descriptor_matches(TractDescriptor(trs="", sec="1"), "T1")
        assert not descriptor_matches(TractDescriptor(trs="t1", sec=""), "T1")


class TestMatches:

    def test_any_descriptor_suffices(self, make_event):
        event = make_event(tracts=[{"trs": "t9", "sec": "9"}, {"trs": "t1", "sec": "1"}])
        assert matches(event, "T1")

    def test_parts_must_come_from_one_descriptor(self, make_event):
        event = make_event(tracts=[{"trs": "t1", "sec": "9"}, {"trs": "t9", "sec": "1"}])
        assert not matches(event, "T1")

    def test_no_tracts_never_matches(self, make_event):
        assert not matches(make_event(tracts=[]), "T1")

    def test_filter_keeps_order(self, make_event):
        first = make_event(doc_id="1")
        other = make_event(doc_id="2", tracts=[{"trs": "t7", "sec": "7"}])
        last = make_event(doc_id="3")
        assert filter_events([first, other, last], "T1") == [first, last]
