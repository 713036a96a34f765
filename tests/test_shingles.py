"""Tests for ShingleSet construction and queries."""

import pytest

from dupcheck.shingles import ShingleSet, build_shingles


class TestShingleSetBuild:
    def test_counts_with_multiplicity(self):
        s = ShingleSet.build(b"abcabc", 3)
        assert dict(s.items()) == {b"abc": 2, b"bca": 1, b"cab": 1}
        assert s.total == 4
        assert len(s) == 3

    def test_repeated_single_byte(self):
        s = build_shingles(b"aaaa", 3)
        assert dict(s.items()) == {b"aaa": 2}
        assert s.total == 2

    def test_short_text_is_empty(self):
        s = ShingleSet.build(b"ab", 3)
        assert len(s) == 0
        assert s.total == 0
        assert list(s) == []

    def test_total_equals_window_count(self):
        text = b"the quick brown fox jumps over the lazy dog"
        s = ShingleSet.build(text, 3)
        assert s.total == len(text) - 2
        assert sum(c for _, c in s.items()) == s.total

    def test_table_size_hint_is_not_a_limit(self):
        text = bytes(range(97, 123)) * 2
        s = ShingleSet.build(text, 2, table_size_hint=3)
        assert len(s) > 3

    def test_does_not_reference_source_buffer(self):
        buf = bytearray(b"abcd")
        s = ShingleSet.build(bytes(buf), 3)
        buf[:] = b"zzzz"
        assert b"abc" in s and b"bcd" in s

    def test_many_distinct_keys(self):
        text = bytes((i * 7 + j) % 256 for i in range(200) for j in range(3))
        s = ShingleSet.build(text, 3)
        assert s.total == len(text) - 2
        assert sum(c for _, c in s.items()) == s.total


class TestShingleSetQueries:
    def test_count_missing_is_zero(self):
        s = ShingleSet.build(b"abcabc", 3)
        assert s.count(b"abc") == 2
        assert s.count(b"zzz") == 0
        assert b"zzz" not in s

    def test_most_common(self):
        s = ShingleSet.build(b"abcabc", 3)
        assert s.most_common(1) == [(b"abc", 2)]
        assert [g for g, _ in s.most_common()] == [b"abc", b"bca", b"cab"]

    def test_add_rejects_wrong_length(self):
        s = ShingleSet(3)
        with pytest.raises(ValueError):
            s.add(b"ab")

    def test_rejects_non_positive_n(self):
        with pytest.raises(ValueError):
            ShingleSet(0)

    def test_repr(self):
        assert repr(ShingleSet.build(b"aaaa", 3)) == "ShingleSet(n=3, distinct=1, total=2)"
