"""Tests for the top-N MRR metric"""

import logging
from dataclasses import dataclass

import pytest

from recgraph.metrics import MeanAccumulator, EvalUser, TopNMRRMetric


@dataclass
class Rec:
    id: int
    score: float = 0.0


def test_mean_accumulator():
    acc = MeanAccumulator()
    assert acc.mean == 0.0
    acc.add(1.0)
    acc.add(0.5)
    assert acc.mean == 0.75


def test_rank_of_first_good_item():
    metric = TopNMRRMetric()
    ctx = metric.create_context(range(10))

    result = metric.measure_user(EvalUser(1, {3, 5}), [7, 5, 3], ctx)
    assert result.rank == 2
    assert result.recip_rank == 0.5


def test_miss_scores_zero():
    metric = TopNMRRMetric()
    ctx = metric.create_context(range(10))

    result = metric.measure_user(EvalUser(1, {9}), [1, 2, 3], ctx)
    assert result.rank is None
    assert result.recip_rank == 0.0


def test_aggregate():
    metric = TopNMRRMetric()
    ctx = metric.create_context(range(10))
    metric.measure_user(EvalUser(1, {2}), [1, 2], ctx)     # 0.5
    metric.measure_user(EvalUser(2, {9}), [1, 2], ctx)     # miss
    metric.measure_user(EvalUser(3, {1}), [1, 2], ctx)     # 1.0

    agg = metric.get_aggregate_measurements(ctx)
    assert agg.mrr == pytest.approx(0.5)
    assert agg.good_mrr == pytest.approx(0.75)
    assert agg.to_dict() == {"MRR": agg.mrr, "MRR.OfGood": agg.good_mrr}


def test_empty_context():
    metric = TopNMRRMetric()
    agg = metric.get_aggregate_measurements(metric.create_context([]))
    assert agg.mrr == 0.0
    assert agg.good_mrr == 0.0


def test_suffix_on_columns():
    metric = TopNMRRMetric(suffix="top10")
    ctx = metric.create_context(range(5))
    user = metric.measure_user(EvalUser(1, {1}), [0, 1], ctx)

    assert user.to_dict() == {"Rank.top10": 2, "RecipRank.top10": 0.5}
    assert set(metric.get_aggregate_measurements(ctx).to_dict()) == {
        "MRR.top10",
        "MRR.OfGood.top10",
    }


def test_recommendation_objects_with_id():
    metric = TopNMRRMetric()
    ctx = metric.create_context(range(10))
    result = metric.measure_user(EvalUser(1, {4}), [Rec(8), Rec(6), Rec(4)], ctx)
    assert result.rank == 3


def test_custom_selector_sees_universe():
    def popular(universe, user):
        return {i for i in universe if i < 2}

    metric = TopNMRRMetric(good_items=popular)
    ctx = metric.create_context(range(10))
    result = metric.measure_user(EvalUser(1, set()), [5, 1], ctx)
    assert result.rank == 2


def test_warns_without_good_items(caplog):
    metric = TopNMRRMetric()
    ctx = metric.create_context(range(3))

    with caplog.at_level(logging.WARNING, logger="recgraph.metrics.mrr"):
        metric.measure_user(EvalUser("u9", set()), [0, 1], ctx)

    assert "no good items for user u9" in caplog.text
