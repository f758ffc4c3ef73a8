"""Data models: predictive unit graph, SeldonDeployment manifests, naming constants."""

from seldon_topology.models.constants import (
    DEFAULT_NAMING_CONFIG,
    LOCAL_ENGINE_HOST,
    NamingConfig,
)
from seldon_topology.models.deployment import (
    Container,
    Explainer,
    ObjectMeta,
    PodSpec,
    PredictorSpec,
    SeldonDeployment,
    SeldonDeploymentSpec,
    SeldonPodSpec,
)
from seldon_topology.models.graph import (
    Endpoint,
    Parameter,
    PayloadLogger,
    PredictiveUnit,
)

__all__ = [
    "DEFAULT_NAMING_CONFIG",
    "LOCAL_ENGINE_HOST",
    "NamingConfig",
    "Container",
    "Explainer",
    "ObjectMeta",
    "PodSpec",
    "PredictorSpec",
    "SeldonDeployment",
    "SeldonDeploymentSpec",
    "SeldonPodSpec",
    "Endpoint",
    "Parameter",
    "PayloadLogger",
    "PredictiveUnit",
]
