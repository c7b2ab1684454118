# recgraph/metrics/mrr.py
"""
Mean reciprocal rank over top-N recommendation lists.

For each user the reciprocal rank is 1/k, where k is the 1-based position of
the first good item in the list, or 0 if no good item was recommended. The
aggregate reports two means:

- MRR: over all users
- MRR.OfGood: over the users who got at least one good item
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Set

logger = logging.getLogger(__name__)

ItemSelector = Callable[[Set[Any], "EvalUser"], Set[Any]]


class MeanAccumulator:
    def __init__(self):
        self.total = 0.0
        self.count = 0

    def add(self, value: float):
        self.total += value
        self.count += 1

    @property
    def mean(self) -> float:
        if self.count == 0:
            return 0.0
        return self.total / self.count


@dataclass
class EvalUser:
    user_id: Any
    test_items: Set[Any] = field(default_factory=set)


def user_test_items(universe: Set[Any], user: EvalUser) -> Set[Any]:
    """Default selector: the user's own test items"""
    return set(user.test_items)


def _with_suffix(columns: Dict[str, Any], suffix: Optional[str]) -> Dict[str, Any]:
    if not suffix:
        return columns
    return {f"{name}.{suffix}": value for name, value in columns.items()}


@dataclass
class UserResult:
    rank: Optional[int]
    suffix: Optional[str] = None

    @property
    def recip_rank(self) -> float:
        return 0.0 if self.rank is None else 1.0 / self.rank

    def to_dict(self) -> dict:
        return _with_suffix(
            {"Rank": self.rank, "RecipRank": self.recip_rank}, self.suffix
        )


@dataclass
class AggregateResult:
    mrr: float          # all users, misses count as 0
    good_mrr: float     # users with a hit only
    suffix: Optional[str] = None

    def to_dict(self) -> dict:
        return _with_suffix(
            {"MRR": self.mrr, "MRR.OfGood": self.good_mrr}, self.suffix
        )


class Context:
    def __init__(self, universe: Iterable[Any]):
        self.universe: Set[Any] = set(universe)
        self.all_mean = MeanAccumulator()
        self.good_mean = MeanAccumulator()

    def add_user(self, result: UserResult):
        self.all_mean.add(result.recip_rank)
        if result.rank is not None:
            self.good_mean.add(result.recip_rank)


class TopNMRRMetric:
    """
    Compute the mean reciprocal rank.

    Usage:
        metric = TopNMRRMetric(suffix="top10")
        ctx = metric.create_context(all_item_ids)
        for user, recs in runs:
            metric.measure_user(user, recs, ctx)
        metric.get_aggregate_measurements(ctx).to_dict()
    """

    def __init__(self, good_items: Optional[ItemSelector] = None, suffix: Optional[str] = None):
        self.good_items = good_items or user_test_items
        self.suffix = suffix

    def create_context(self, universe: Iterable[Any]) -> Context:
        return Context(universe)

    def measure_user(self, user: EvalUser, recommendations: Iterable[Any], context: Context) -> UserResult:
        good = self.good_items(context.universe, user)
        if not good:
            logger.warning("no good items for user %s", user.user_id)

        rank = None
        for i, rec in enumerate(recommendations, start=1):
            if getattr(rec, "id", rec) in good:
                rank = i
                break

        result = UserResult(rank, self.suffix)
        context.add_user(result)
        return result

    def get_aggregate_measurements(self, context: Context) -> AggregateResult:
        return AggregateResult(
            mrr=context.all_mean.mean,
            good_mrr=context.good_mean.mean,
            suffix=self.suffix,
        )
