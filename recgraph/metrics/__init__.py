from recgraph.metrics.mrr import (
    AggregateResult,
    Context,
    MeanAccumulator,
    EvalUser,
    TopNMRRMetric,
    UserResult,
    user_test_items,
)

__all__ = [
    "AggregateResult",
    "Context",
    "MeanAccumulator",
    "EvalUser",
    "TopNMRRMetric",
    "UserResult",
    "user_test_items",
]
