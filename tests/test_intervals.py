"""Tests for time intervals and Allen relations."""

import pytest
from datetime import date, timedelta

from pydantic import ValidationError

from temporal_engine.core.ontology import (
    AllenRelation,
    TimeInterval,
    predecessor,
    successor,
)


def interval(start: str, end: str) -> TimeInterval:
    return TimeInterval(start=date.fromisoformat(start), end=date.fromisoformat(end))


def all_intervals(days: int, min_length: int = 0) -> list[TimeInterval]:
    """Every interval inside a small window of days."""
    base = date(2025, 1, 1)
    points = [base + timedelta(days=i) for i in range(days)]
    return [
        TimeInterval(start=s, end=e)
        for s in points
        for e in points
        if (e - s).days >= min_length
    ]


def textbook_relations(a: TimeInterval, b: TimeInterval) -> set[AllenRelation]:
    """Allen's definitions evaluated independently of check order."""
    checks = {
        AllenRelation.BEFORE: a.end < b.start,
        AllenRelation.MEETS: a.end == b.start,
        AllenRelation.OVERLAPS: a.start < b.start < a.end < b.end,
        AllenRelation.FINISHED_BY: a.start < b.start and a.end == b.end,
        AllenRelation.CONTAINS: a.start < b.start and a.end > b.end,
        AllenRelation.STARTS: a.start == b.start and a.end < b.end,
        AllenRelation.EQUAL: a.start == b.start and a.end == b.end,
        AllenRelation.STARTED_BY: a.start == b.start and a.end > b.end,
        AllenRelation.DURING: a.start > b.start and a.end < b.end,
        AllenRelation.FINISHES: a.start > b.start and a.end == b.end,
        AllenRelation.OVERLAPPED_BY: b.start < a.start < b.end < a.end,
        AllenRelation.MET_BY: a.start == b.end,
        AllenRelation.AFTER: a.start > b.end,
    }
    return {relation for relation, holds in checks.items() if holds}


class TestConstruction:
    def test_valid_interval(self):
        i = interval("2025-01-01", "2025-06-30")
        assert i.start == date(2025, 1, 1)
        assert i.end == date(2025, 6, 30)

    def test_single_day_interval(self):
        i = interval("2025-01-01", "2025-01-01")
        assert i.duration_days() == 0

    def test_reversed_bounds_rejected(self):
        with pytest.raises(ValidationError):
            TimeInterval(start=date(2025, 6, 30), end=date(2025, 1, 1))

    def test_try_new_returns_none_for_reversed_bounds(self):
        assert TimeInterval.try_new(date(2025, 6, 30), date(2025, 1, 1)) is None

    def test_try_new_builds_interval(self):
        i = TimeInterval.try_new(date(2025, 1, 1), date(2025, 1, 31))
        assert i == interval("2025-01-01", "2025-01-31")

    def test_interval_is_immutable(self):
        i = interval("2025-01-01", "2025-01-31")
        with pytest.raises(ValidationError):
            i.end = date(2025, 2, 1)

    def test_equal_intervals_hash_alike(self):
        assert len({interval("2025-01-01", "2025-01-31"), interval("2025-01-01", "2025-01-31")}) == 1

    def test_str(self):
        assert str(interval("2025-01-01", "2025-06-30")) == "[2025-01-01 to 2025-06-30]"


class TestDayArithmetic:
    def test_successor_and_predecessor(self):
        assert successor(date(2024, 2, 28)) == date(2024, 2, 29)
        assert predecessor(date(2025, 1, 1)) == date(2024, 12, 31)

    def test_bounds_saturate(self):
        assert successor(date.max) == date.max
        assert predecessor(date.min) == date.min


class TestIntervalQueries:
    def test_duration_days(self):
        assert interval("2025-01-01", "2025-12-31").duration_days() == 364

    def test_contains_date_inclusive(self):
        i = interval("2025-01-01", "2025-01-31")
        assert i.contains_date(date(2025, 1, 1))
        assert i.contains_date(date(2025, 1, 31))
        assert not i.contains_date(date(2025, 2, 1))
        assert not i.contains_date(date(2024, 12, 31))

    def test_intersection(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-04-01", "2025-09-30")
        assert i1.intersection(i2) == interval("2025-04-01", "2025-06-30")

    def test_intersection_of_disjoint_intervals(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-07-01", "2025-12-31")
        assert i1.intersection(i2) is None

    def test_meeting_intervals_share_a_day(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-06-30", "2025-12-31")
        assert i1.intersection(i2) == interval("2025-06-30", "2025-06-30")

    def test_union_of_overlapping(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-04-01", "2025-09-30")
        assert i1.union(i2) == interval("2025-01-01", "2025-09-30")

    def test_union_of_disjoint_is_none(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-07-01", "2025-12-31")
        assert i1.union(i2) is None
        assert i2.union(i1) is None

    def test_union_of_contained(self):
        outer = interval("2025-01-01", "2025-12-31")
        inner = interval("2025-03-01", "2025-03-31")
        assert outer.union(inner) == outer
        assert inner.union(outer) == outer


class TestRelate:
    def test_before_and_after(self):
        i1 = interval("2025-01-01", "2025-06-30")
        i2 = interval("2025-07-01", "2025-12-31")
        assert i1.relate(i2) == AllenRelation.BEFORE
        assert i2.relate(i1) == AllenRelation.AFTER

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (("2025-01-01", "2025-01-10"), ("2025-01-20", "2025-01-30"), AllenRelation.BEFORE),
            (("2025-01-01", "2025-01-10"), ("2025-01-10", "2025-01-30"), AllenRelation.MEETS),
            (("2025-01-01", "2025-01-15"), ("2025-01-10", "2025-01-30"), AllenRelation.OVERLAPS),
            (("2025-01-01", "2025-01-30"), ("2025-01-10", "2025-01-30"), AllenRelation.FINISHED_BY),
            (("2025-01-01", "2025-01-30"), ("2025-01-10", "2025-01-20"), AllenRelation.CONTAINS),
            (("2025-01-01", "2025-01-10"), ("2025-01-01", "2025-01-30"), AllenRelation.STARTS),
            (("2025-01-01", "2025-01-30"), ("2025-01-01", "2025-01-30"), AllenRelation.EQUAL),
            (("2025-01-01", "2025-01-30"), ("2025-01-01", "2025-01-10"), AllenRelation.STARTED_BY),
            (("2025-01-10", "2025-01-20"), ("2025-01-01", "2025-01-30"), AllenRelation.DURING),
            (("2025-01-10", "2025-01-30"), ("2025-01-01", "2025-01-30"), AllenRelation.FINISHES),
            (("2025-01-10", "2025-01-30"), ("2025-01-01", "2025-01-15"), AllenRelation.OVERLAPPED_BY),
            (("2025-01-10", "2025-01-30"), ("2025-01-01", "2025-01-10"), AllenRelation.MET_BY),
            (("2025-01-20", "2025-01-30"), ("2025-01-01", "2025-01-10"), AllenRelation.AFTER),
        ],
    )
    def test_each_relation(self, a, b, expected):
        assert interval(*a).relate(interval(*b)) == expected

    def test_self_relation_is_equal(self):
        for i in all_intervals(6, min_length=1):
            assert i.relate(i) == AllenRelation.EQUAL

    def test_single_day_self_relation_resolves_to_meets(self):
        """A one-day interval's end equals its own start, and that check comes first."""
        day = interval("2025-03-01", "2025-03-01")
        assert day.relate(day) == AllenRelation.MEETS

    def test_boundary_resolved_by_check_order(self):
        """A one-day interval at another's end finishes it rather than meeting it."""
        last_day = interval("2025-01-31", "2025-01-31")
        month = interval("2025-01-01", "2025-01-31")
        assert last_day.relate(month) == AllenRelation.FINISHES

        first_day = interval("2025-01-01", "2025-01-01")
        assert first_day.relate(month) == AllenRelation.MEETS

    def test_matches_textbook_definitions(self):
        """For multi-day intervals exactly one definition holds and relate() picks it."""
        intervals = all_intervals(6, min_length=1)
        for a in intervals:
            for b in intervals:
                holding = textbook_relations(a, b)
                assert holding == {a.relate(b)}, (a, b, holding)

    def test_inverse_pairs(self):
        intervals = all_intervals(6, min_length=1)
        for a in intervals:
            for b in intervals:
                assert a.relate(b) == b.relate(a).inverse

    def test_inverse_table(self):
        assert AllenRelation.BEFORE.inverse == AllenRelation.AFTER
        assert AllenRelation.MEETS.inverse == AllenRelation.MET_BY
        assert AllenRelation.OVERLAPS.inverse == AllenRelation.OVERLAPPED_BY
        assert AllenRelation.STARTS.inverse == AllenRelation.STARTED_BY
        assert AllenRelation.FINISHES.inverse == AllenRelation.FINISHED_BY
        assert AllenRelation.CONTAINS.inverse == AllenRelation.DURING
        assert AllenRelation.EQUAL.inverse == AllenRelation.EQUAL
        for relation in AllenRelation:
            assert relation.inverse.inverse == relation

    def test_intersection_iff_not_disjoint(self):
        intervals = all_intervals(5)
        for a in intervals:
            for b in intervals:
                disjoint = a.relate(b) in (AllenRelation.BEFORE, AllenRelation.AFTER)
                assert (a.intersection(b) is None) == disjoint, (a, b)

    def test_display_names(self):
        assert AllenRelation.FINISHED_BY.value == "finished-by"
        assert AllenRelation.EQUAL.value == "equals"
        assert len(AllenRelation) == 13
