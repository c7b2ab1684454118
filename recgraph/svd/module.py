# recgraph/svd/module.py
"""
Configuration for the gradient-descent SVD recommender.

The module holds hyperparameters only. A dependency-injection container
reads them through `bindings()`, keyed by qualifier, and the component
graph shows them through `describe()`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Type

from pydantic import BaseModel, Field

from recgraph import config
from recgraph.graph.node_builder import ComponentNodeBuilder
from recgraph.graph.types import Qualifier, TypeRef


# -------------------------
# Qualifiers
# -------------------------

@dataclass(frozen=True)
class FeatureCount(Qualifier):
    """Number of latent features to train."""


@dataclass(frozen=True)
class LearningRate(Qualifier):
    """Step size for each gradient update."""


@dataclass(frozen=True)
class FeatureTrainingThreshold(Qualifier):
    """Stop training a feature once the RMSE improvement drops below this."""


@dataclass(frozen=True)
class GradientDescentRegularization(Qualifier):
    """Regularization term applied to feature updates."""


@dataclass(frozen=True)
class IterationCount(Qualifier):
    """Fixed number of iterations per feature (0 = use the threshold)."""


@dataclass(frozen=True)
class ClampingFunction(Qualifier):
    """Function applied to predictions while training."""


# -------------------------
# Clamping functions
# -------------------------

class ClampFunction(ABC):
    @abstractmethod
    def __call__(self, value: float) -> float:
        ...


class IdentityClamp(ClampFunction):
    def __call__(self, value: float) -> float:
        return value


# -------------------------
# Module
# -------------------------

class GradientDescentSVDModule(BaseModel):
    feature_count: int = Field(default=100, gt=0)
    learning_rate: float = Field(default=0.001, ge=0)
    feature_training_threshold: float = Field(default=1.0e-5, ge=0)
    gradient_descent_regularization: float = Field(default=0.015, ge=0)
    iteration_count: int = Field(default=0, ge=0)
    clamping_function: Type[ClampFunction] = IdentityClamp

    model_config = {"validate_assignment": True}

    @classmethod
    def from_settings(cls) -> "GradientDescentSVDModule":
        return cls(
            feature_count=config.SVD_FEATURE_COUNT,
            learning_rate=config.SVD_LEARNING_RATE,
            feature_training_threshold=config.SVD_FEATURE_TRAINING_THRESHOLD,
            gradient_descent_regularization=config.SVD_REGULARIZATION,
            iteration_count=config.SVD_ITERATION_COUNT,
        )

    def parameters(self) -> List[Tuple[Qualifier, Any]]:
        """Numeric hyperparameters, in declaration order."""
        return [
            (FeatureCount(), self.feature_count),
            (LearningRate(), self.learning_rate),
            (FeatureTrainingThreshold(), self.feature_training_threshold),
            (GradientDescentRegularization(), self.gradient_descent_regularization),
            (IterationCount(), self.iteration_count),
        ]

    def bindings(self) -> Dict[Qualifier, Any]:
        bound: Dict[Qualifier, Any] = dict(self.parameters())
        bound[ClampingFunction()] = self.clamping_function
        return bound

    def describe(self, builder: ComponentNodeBuilder) -> ComponentNodeBuilder:
        """
        Register this module's settings on a component node.

        The clamping function is a dependency (it is a bound type); the
        numeric hyperparameters become parameter rows.
        """
        builder.add_dependency(TypeRef.of(ClampFunction), ClampingFunction())
        for qualifier, value in self.parameters():
            builder.add_parameter(qualifier, value)
        return builder
