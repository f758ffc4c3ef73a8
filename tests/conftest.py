"""Pytest configuration and shared fixtures."""

import os
from typing import Any, Iterator

import pytest

os.environ.setdefault("LOG_FORMAT", "readable")

from seldon_topology.core.config import get_settings  # noqa: E402
from seldon_topology.models.graph import PredictiveUnit  # noqa: E402
from seldon_topology.services.naming import get_naming_config  # noqa: E402


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Drop cached settings before and after a test that changes env."""
    get_settings.cache_clear()
    get_naming_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_naming_config.cache_clear()


@pytest.fixture
def sample_graph() -> PredictiveUnit:
    """A(children: B, C(children: D))."""
    return PredictiveUnit(
        name="A",
        type="ROUTER",
        children=[
            PredictiveUnit(name="B", type="MODEL"),
            PredictiveUnit(name="C", type="COMBINER", children=[PredictiveUnit(name="D", type="MODEL")]),
        ],
    )


@pytest.fixture
def seldon_manifest() -> dict[str, Any]:
    """Two-predictor SeldonDeployment manifest (default + canary)."""
    return {
        "apiVersion": "machinelearning.seldon.io/v1",
        "kind": "SeldonDeployment",
        "metadata": {"name": "fraud-detector", "namespace": "models"},
        "spec": {
            "protocol": "seldon",
            "transport": "rest",
            "oauth_secret": "very-secret-value",
            "predictors": [
                {
                    "name": "default",
                    "traffic": 90,
                    "componentSpecs": [
                        {
                            "spec": {
                                "containers": [
                                    {"name": "transformer", "image": "acme/transformer:1.0"},
                                    {"name": "classifier", "image": "acme/classifier:2.3"},
                                ]
                            },
                            "hpaSpec": {"minReplicas": 1, "maxReplicas": 3},
                        },
                        {
                            "metadata": {"name": "router-pod"},
                            "spec": {"containers": [{"name": "ab-router"}]},
                        },
                    ],
                    "graph": {
                        "name": "transformer",
                        "type": "TRANSFORMER",
                        "endpoint": {"service_host": "localhost", "service_port": 9000, "type": "REST"},
                        "children": [
                            {
                                "name": "classifier",
                                "type": "MODEL",
                                "modelUri": "gs://acme-models/fraud/classifier",
                                "parameters": [
                                    {"name": "threshold", "value": "0.5", "type": "FLOAT"},
                                ],
                            }
                        ],
                    },
                    "explainer": {"type": "AnchorTabular", "modelUri": "gs://acme-models/fraud/explainer"},
                },
                {
                    "name": "canary",
                    "traffic": 10,
                    "annotations": {"seldon.io/svc-name": "fraud-canary-svc"},
                    "componentSpecs": [
                        {"spec": {"containers": [{"name": "classifier-v2"}, {"name": "sidecar"}]}},
                    ],
                    "graph": {"name": "classifier-v2", "type": "MODEL"},
                },
            ],
        },
    }
