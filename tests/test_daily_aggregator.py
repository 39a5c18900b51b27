"""Tests for daily aggregation and target comparison."""

from itertools import permutations

from foodlens.domain.stats import DailyTotals
from foodlens.domain.targets import MacroTargets
from foodlens.services.stats import aggregate, compare_to_targets, progress_percent
from tests.conftest import make_entry


def test_aggregate_empty_is_zero() -> None:
    totals = aggregate([])

    assert totals == DailyTotals(calories=0, protein=0, carbs=0, fat=0, entries=())


def test_aggregate_sums_every_field() -> None:
    entries = [
        make_entry(300, protein=20, carbs=30, fat=10),
        make_entry(150, protein=5, carbs=25, fat=3),
    ]

    totals = aggregate(entries)

    assert totals.calories == 450
    assert totals.protein == 25
    assert totals.carbs == 55
    assert totals.fat == 13


def test_aggregate_is_order_independent_and_keeps_order() -> None:
    entries = [
        make_entry(300, name="Oats"),
        make_entry(150, name="Apple"),
        make_entry(520, name="Curry"),
    ]

    for ordering in permutations(entries):
        totals = aggregate(ordering)
        assert totals.calories == 970
        assert [entry.name for entry in totals.entries] == [
            entry.name for entry in ordering
        ]


def test_aggregate_accepts_generators() -> None:
    totals = aggregate(make_entry(cal) for cal in (100, 200))

    assert totals.calories == 300
    assert len(totals.entries) == 2


def test_aggregate_does_not_filter_by_date() -> None:
    entries = [make_entry(100), make_entry(200, user_id="someone-else")]

    assert aggregate(entries).calories == 300


def test_compare_to_targets_caps_percent() -> None:
    totals = aggregate([make_entry(2500, protein=75, carbs=0, fat=20)])
    targets = MacroTargets(calories=2000, protein=150, carbs=200, fat=67)

    progress = compare_to_targets(totals, targets)

    assert progress.calories.percent == 100.0
    assert progress.protein.percent == 50.0
    assert progress.carbs.percent == 0.0
    assert progress.fat.current == 20
    assert progress.fat.target == 67


def test_progress_percent_zero_target() -> None:
    assert progress_percent(10, 0) == 0.0
