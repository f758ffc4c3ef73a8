"""Unit tests for whole-deployment resource name planning."""

import json
import logging

import pytest

from seldon_topology.models.constants import NamingConfig
from seldon_topology.models.deployment import SeldonDeployment
from seldon_topology.models.graph import PredictiveUnit
from seldon_topology.services.resource_plan import (
    parameters_env_value,
    plan_resource_names,
    pod_spec_deployment_name_for,
    unit_env,
    unit_labels,
)

CONFIG = NamingConfig()


@pytest.fixture
def sdep(seldon_manifest: dict) -> SeldonDeployment:
    return SeldonDeployment.from_manifest(seldon_manifest)


def test_plan_default_predictor(sdep: SeldonDeployment) -> None:
    plan = plan_resource_names(sdep, CONFIG)
    assert plan.deployment_name == "fraud-detector"
    default = plan.for_predictor("default")
    assert default is not None
    assert default.predictor_key == "fraud-detector-default"
    assert default.service_orchestrator_name == "fraud-detector-default-svc-orch"
    assert default.explainer_deployment_name == "fraud-detector-default-explainer"
    assert default.component_deployment_names == [
        "fraud-detector-default-0-transformer-classifier",
        "fraud-detector-default-1-router-pod",
    ]
    # ab-router is not a graph unit, so no service
    assert default.container_service_names == {
        "transformer": "fraud-detector-default-transformer",
        "classifier": "fraud-detector-default-classifier",
    }
    assert default.engine_unit_name == "transformer"


def test_plan_canary_predictor(sdep: SeldonDeployment) -> None:
    canary = plan_resource_names(sdep, CONFIG).for_predictor("canary")
    assert canary is not None
    assert canary.predictor_key == "fraud-canary-svc"
    assert canary.explainer_deployment_name is None
    assert canary.component_deployment_names == ["fraud-detector-canary-0-classifier-v2-sidecar"]
    assert canary.container_service_names == {"classifier-v2": "fraud-detector-canary-classifier-v2"}
    assert canary.engine_unit_name is None


def test_plan_hashes_long_names(seldon_manifest: dict) -> None:
    seldon_manifest["metadata"]["name"] = "fraud-detector" * 4
    plan = plan_resource_names(SeldonDeployment.from_manifest(seldon_manifest), CONFIG)
    assert plan.deployment_name == "fraud-detector" * 4
    default = plan.for_predictor("default")
    assert default is not None
    for name in [default.service_orchestrator_name, *default.component_deployment_names]:
        assert name.startswith("seldon-")
        assert len(name) == 39
    assert plan.for_predictor("canary").predictor_key == "fraud-canary-svc"


def test_plan_for_unknown_predictor(sdep: SeldonDeployment) -> None:
    assert plan_resource_names(sdep, CONFIG).for_predictor("shadow") is None


def test_pod_spec_name_for_missing_pod_spec(sdep: SeldonDeployment) -> None:
    predictor = sdep.spec.predictors[0]
    assert pod_spec_deployment_name_for(sdep, predictor, None, 3, CONFIG) == "fraud-detector-default-3-"


def test_parameters_env_value(sdep: SeldonDeployment) -> None:
    classifier = sdep.spec.predictors[0].graph.children[0]
    assert json.loads(parameters_env_value(classifier)) == [
        {"name": "threshold", "value": "0.5", "type": "FLOAT"}
    ]
    assert parameters_env_value(sdep.spec.predictors[0].graph) == "[]"


def test_unit_env_for_model_unit(sdep: SeldonDeployment) -> None:
    classifier = sdep.spec.predictors[0].graph.children[0]
    env = unit_env("fraud-detector", "default", classifier)
    assert env["SELDON_DEPLOYMENT_ID"] == "fraud-detector"
    assert env["PREDICTOR_ID"] == "default"
    assert env["PREDICTIVE_UNIT_ID"] == "classifier"
    assert json.loads(env["PREDICTIVE_UNIT_PARAMETERS"]) == [
        {"name": "threshold", "value": "0.5", "type": "FLOAT"}
    ]
    assert "PREDICTIVE_UNIT_SERVICE_PORT" not in env


def test_unit_env_ports_only_when_set(sdep: SeldonDeployment) -> None:
    transformer = sdep.spec.predictors[0].graph
    env = unit_env("fraud-detector", "default", transformer)
    assert env["PREDICTIVE_UNIT_SERVICE_PORT"] == "9000"
    assert "PREDICTIVE_UNIT_HTTP_SERVICE_PORT" not in env
    assert "PREDICTIVE_UNIT_GRPC_SERVICE_PORT" not in env


def test_unit_labels(sdep: SeldonDeployment) -> None:
    classifier = sdep.spec.predictors[0].graph.children[0]
    assert unit_labels("fraud-detector", classifier) == {
        "seldon-deployment-id": "fraud-detector",
        "app.kubernetes.io/managed-by": "seldon-core",
        "seldon.io/model": "true",
    }
    untyped = unit_labels("fraud-detector", PredictiveUnit(name="bare"))
    assert untyped == {
        "seldon-deployment-id": "fraud-detector",
        "app.kubernetes.io/managed-by": "seldon-core",
    }


def test_plan_logs_summary(sdep: SeldonDeployment, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="seldon_topology.services.resource_plan")
    plan_resource_names(sdep, CONFIG)
    assert "Planned resource names" in caplog.text
    assert "deployment=fraud-detector" in caplog.text
