from recgraph.svd.module import (
    ClampFunction,
    ClampingFunction,
    FeatureCount,
    FeatureTrainingThreshold,
    GradientDescentRegularization,
    GradientDescentSVDModule,
    IdentityClamp,
    IterationCount,
    LearningRate,
)

__all__ = [
    "ClampFunction",
    "ClampingFunction",
    "FeatureCount",
    "FeatureTrainingThreshold",
    "GradientDescentRegularization",
    "GradientDescentSVDModule",
    "IdentityClamp",
    "IterationCount",
    "LearningRate",
]
