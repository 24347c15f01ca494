"""Tests for hierarchical task numbers."""

import pytest

from snippet_engine.errors import FormatError
from snippet_engine.numbering import HierarchicalNumber, in_or_before, in_task, parse_optional

H = HierarchicalNumber


class TestParse:
    @pytest.mark.parametrize("text,expected", [
        ("2", H(2)),
        ("2.3", H(2, 3)),
        ("2.3.1", H(2, 3, 1)),
        ("0", H(0)),
        (" 4.5 ", H(4, 5)),
    ])
    def test_valid(self, text, expected):
        assert HierarchicalNumber.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "12", "1.2.3.4", "1 2", "x.y"])
    def test_invalid(self, text):
        with pytest.raises(FormatError):
            HierarchicalNumber.parse(text)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            HierarchicalNumber.parse("nope")

    def test_parse_optional_blank(self):
        assert parse_optional(None) is None
        assert parse_optional("  ") is None
        assert parse_optional("3.1") == H(3, 1)


class TestFormat:
    @pytest.mark.parametrize("text", ["2", "2.3", "2.3.1"])
    def test_round_trip(self, text):
        assert str(HierarchicalNumber.parse(text)) == text

    def test_levels(self):
        assert H(1, 2).levels == (1, 2)


class TestConstruction:
    def test_subminor_requires_minor(self):
        with pytest.raises(ValueError):
            H(1, None, 2)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            H(-1)

    def test_immutable(self):
        n = H(1)
        with pytest.raises(AttributeError):
            n.major = 2


class TestInOrBefore:
    def test_same(self):
        assert H(2).in_or_before(H(2))

    def test_later_major(self):
        assert not H(3).in_or_before(H(2))

    def test_earlier_major(self):
        assert H(1, 1).in_or_before(H(2, 1))
        assert H(1).in_or_before(H(2, 1))

    def test_each_level_checked_against_cutoff(self):
        assert not H(1, 5).in_or_before(H(2, 1))
        assert not H(2, 1, 5).in_or_before(H(2, 2, 1))
        assert not H(1, 3, 2).in_or_before(H(2, 4, 1))
        assert H(1, 3, 1).in_or_before(H(2, 4, 1))

    def test_minor_compared(self):
        assert H(2, 1).in_or_before(H(2, 3))
        assert not H(2, 4).in_or_before(H(2, 3))

    def test_subminor_compared(self):
        assert H(2, 3, 1).in_or_before(H(2, 3, 1))
        assert not H(2, 3, 2).in_or_before(H(2, 3, 1))

    def test_absent_level_is_wildcard(self):
        assert H(2).in_or_before(H(2, 3))
        assert H(2, 9).in_or_before(H(2))
        assert H(2, 3, 9).in_or_before(H(2, 3))

    def test_absent_number_matches(self):
        assert in_or_before(None, H(1))
        assert in_or_before(H(9), None)
        assert in_or_before(None, None)

    def test_monotonic_chain(self):
        chain = [H(1), H(1, 2), H(1, 2, 3), H(2)]
        for i, a in enumerate(chain):
            for c in chain[i:]:
                if a.in_or_before(c):
                    for b in chain[i:chain.index(c) + 1]:
                        assert a.in_or_before(b)


class TestInTask:
    def test_absent_minor_on_left_matches(self):
        assert H(2).in_task(H(2, 3))

    def test_different_minor(self):
        assert not H(2, 1).in_task(H(2, 3))

    def test_different_major(self):
        assert not H(1).in_task(H(2))

    def test_subtask_of_task(self):
        assert H(2, 3, 1).in_task(H(2, 3))
        assert H(2, 3, 1).in_task(H(2))

    def test_absent_number_matches(self):
        assert in_task(None, H(4))
        assert in_task(H(4), None)
