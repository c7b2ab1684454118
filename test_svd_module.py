"""Tests for the gradient-descent SVD configuration module"""

import pytest
from pydantic import ValidationError

from recgraph import config
from recgraph.graph import TABLE, ComponentNodeBuilder
from recgraph.svd import (
    ClampingFunction,
    FeatureCount,
    FeatureTrainingThreshold,
    GradientDescentRegularization,
    GradientDescentSVDModule,
    IdentityClamp,
    IterationCount,
    LearningRate,
)


def test_defaults():
    module = GradientDescentSVDModule()
    assert module.feature_count == 100
    assert module.learning_rate == 0.001
    assert module.feature_training_threshold == 1.0e-5
    assert module.gradient_descent_regularization == 0.015
    assert module.iteration_count == 0
    assert module.clamping_function is IdentityClamp


def test_identity_clamp():
    assert IdentityClamp()(3.5) == 3.5


def test_bindings_keyed_by_qualifier():
    bindings = GradientDescentSVDModule(feature_count=25).bindings()
    assert bindings == {
        FeatureCount(): 25,
        LearningRate(): 0.001,
        FeatureTrainingThreshold(): 1.0e-5,
        GradientDescentRegularization(): 0.015,
        IterationCount(): 0,
        ClampingFunction(): IdentityClamp,
    }


@pytest.mark.parametrize("field,value", [
    ("feature_count", 0),
    ("learning_rate", -0.1),
    ("iteration_count", -1),
    ("clamping_function", int),
])
def test_invalid_settings_rejected(field, value):
    with pytest.raises(ValidationError):
        GradientDescentSVDModule(**{field: value})


def test_setters_are_validated():
    module = GradientDescentSVDModule()
    module.feature_count = 40
    assert module.feature_count == 40
    with pytest.raises(ValidationError):
        module.feature_count = -5


def test_from_settings(monkeypatch):
    monkeypatch.setattr(config, "SVD_FEATURE_COUNT", 42)
    monkeypatch.setattr(config, "SVD_ITERATION_COUNT", 7)
    module = GradientDescentSVDModule.from_settings()
    assert module.feature_count == 42
    assert module.iteration_count == 7


def test_describe_on_node():
    builder = ComponentNodeBuilder("svd", GradientDescentSVDModule)
    GradientDescentSVDModule().describe(builder)
    node = builder.build()

    assert node.shape == TABLE
    assert builder.last_dependency_port() == 1
    assert [d.label for d in builder.dependencies] == [
        "@r.s.m.ClampingFunction: r.s.m.ClampFunction"
    ]
    assert [p.label for p in builder.parameters] == [
        "@r.s.m.FeatureCount: 100",
        "@r.s.m.LearningRate: 0.001",
        "@r.s.m.FeatureTrainingThreshold: 1e-05",
        "@r.s.m.GradientDescentRegularization: 0.015",
        "@r.s.m.IterationCount: 0",
    ]
    assert "<B>r.s.m.GradientDescentSVDModule</B>" in node.body
