"""Compute every derived resource name of a SeldonDeployment in one pass."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from seldon_topology.core.logging import structured_log
from seldon_topology.models.constants import (
    ENV_PREDICTIVE_UNIT_GRPC_SERVICE_PORT,
    ENV_PREDICTIVE_UNIT_HTTP_SERVICE_PORT,
    ENV_PREDICTIVE_UNIT_ID,
    ENV_PREDICTIVE_UNIT_PARAMETERS,
    ENV_PREDICTIVE_UNIT_SERVICE_PORT,
    ENV_PREDICTOR_ID,
    ENV_SELDON_DEPLOYMENT_ID,
    LABEL_MANAGED_BY,
    LABEL_SELDON_ID,
    LABEL_VALUE_SELDON,
    UNIT_TYPE_LABELS,
    NamingConfig,
)
from seldon_topology.models.deployment import PredictorSpec, SeldonDeployment, SeldonPodSpec
from seldon_topology.models.graph import PredictiveUnit
from seldon_topology.services import naming
from seldon_topology.services.graph import find_local_engine_unit, find_unit_by_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredictorResourcePlan:
    predictor_name: str
    predictor_key: str
    service_orchestrator_name: str
    explainer_deployment_name: Optional[str] = None
    component_deployment_names: list[str] = field(default_factory=list)
    container_service_names: dict[str, str] = field(default_factory=dict)
    engine_unit_name: Optional[str] = None


@dataclass(frozen=True)
class DeploymentResourcePlan:
    deployment_name: str
    predictors: list[PredictorResourcePlan] = field(default_factory=list)

    def for_predictor(self, name: str) -> Optional[PredictorResourcePlan]:
        for p in self.predictors:
            if p.predictor_name == name:
                return p
        return None


def deployment_name_for(deployment: SeldonDeployment, config: Optional[NamingConfig] = None) -> str:
    return naming.deployment_name(deployment.name, config)


def explainer_deployment_name_for(
    deployment_name: str,
    predictor: PredictorSpec,
    config: Optional[NamingConfig] = None,
) -> str:
    return naming.explainer_deployment_name(deployment_name, predictor.name, config)


def pod_spec_deployment_name_for(
    deployment: SeldonDeployment,
    predictor: PredictorSpec,
    pod_spec: Optional[SeldonPodSpec],
    index: int,
    config: Optional[NamingConfig] = None,
) -> str:
    # A missing pod spec counts as one with no name and no containers
    if pod_spec is None:
        return naming.pod_spec_deployment_name(deployment.name, predictor.name, index, config=config)
    return naming.pod_spec_deployment_name(
        deployment.name,
        predictor.name,
        index,
        pod_spec_name=pod_spec.metadata.name,
        container_names=pod_spec.container_names,
        config=config,
    )


def service_orchestrator_name_for(
    deployment: SeldonDeployment,
    predictor: PredictorSpec,
    config: Optional[NamingConfig] = None,
) -> str:
    return naming.service_orchestrator_name(deployment.name, predictor.name, config)


def predictor_key_for(
    deployment: SeldonDeployment,
    predictor: PredictorSpec,
    config: Optional[NamingConfig] = None,
) -> str:
    return naming.predictor_key(deployment.name, predictor.name, predictor.annotations, config)


def container_service_name_for(
    deployment_name: str,
    predictor: PredictorSpec,
    container_name: str,
    config: Optional[NamingConfig] = None,
) -> str:
    return naming.container_service_name(deployment_name, predictor.name, container_name, config)


def parameters_env_value(unit: PredictiveUnit) -> str:
    """JSON list injected as PREDICTIVE_UNIT_PARAMETERS for a unit's container."""
    return json.dumps([p.model_dump(mode="json") for p in unit.parameters])


def unit_env(deployment_name: str, predictor_name: str, unit: PredictiveUnit) -> dict[str, str]:
    """Env vars identifying a unit's container; ports only when the endpoint sets them."""
    env = {
        ENV_SELDON_DEPLOYMENT_ID: deployment_name,
        ENV_PREDICTOR_ID: predictor_name,
        ENV_PREDICTIVE_UNIT_ID: unit.name,
        ENV_PREDICTIVE_UNIT_PARAMETERS: parameters_env_value(unit),
    }
    endpoint = unit.endpoint
    if endpoint is not None:
        if endpoint.service_port:
            env[ENV_PREDICTIVE_UNIT_SERVICE_PORT] = str(endpoint.service_port)
        if endpoint.http_port:
            env[ENV_PREDICTIVE_UNIT_HTTP_SERVICE_PORT] = str(endpoint.http_port)
        if endpoint.grpc_port:
            env[ENV_PREDICTIVE_UNIT_GRPC_SERVICE_PORT] = str(endpoint.grpc_port)
    return env


def unit_labels(deployment_name: str, unit: PredictiveUnit) -> dict[str, str]:
    """Pod labels for a unit: deployment id, manager, and the role label for typed units."""
    labels = {
        LABEL_SELDON_ID: deployment_name,
        LABEL_MANAGED_BY: LABEL_VALUE_SELDON,
    }
    role_label = UNIT_TYPE_LABELS.get(unit.type) if unit.type else None
    if role_label:
        labels[role_label] = "true"
    return labels


def _plan_predictor(
    deployment: SeldonDeployment,
    predictor: PredictorSpec,
    config: Optional[NamingConfig],
) -> PredictorResourcePlan:
    component_names = [
        pod_spec_deployment_name_for(deployment, predictor, pod_spec, idx, config)
        for idx, pod_spec in enumerate(predictor.component_specs)
    ]

    # Only containers that implement a graph unit get their own service
    container_services: dict[str, str] = {}
    for pod_spec in predictor.component_specs:
        for container_name in pod_spec.container_names:
            if find_unit_by_name(predictor.graph, container_name) is None:
                continue
            container_services[container_name] = container_service_name_for(
                deployment.name, predictor, container_name, config
            )

    explainer_name = None
    if predictor.explainer is not None:
        explainer_name = explainer_deployment_name_for(deployment.name, predictor, config)

    engine_unit = find_local_engine_unit(predictor.graph)
    return PredictorResourcePlan(
        predictor_name=predictor.name,
        predictor_key=predictor_key_for(deployment, predictor, config),
        service_orchestrator_name=service_orchestrator_name_for(deployment, predictor, config),
        explainer_deployment_name=explainer_name,
        component_deployment_names=component_names,
        container_service_names=container_services,
        engine_unit_name=engine_unit.name if engine_unit is not None else None,
    )


def plan_resource_names(
    deployment: SeldonDeployment,
    config: Optional[NamingConfig] = None,
) -> DeploymentResourcePlan:
    """Derive the names of every resource the deployment owns."""
    predictors = [_plan_predictor(deployment, p, config) for p in deployment.spec.predictors]
    plan = DeploymentResourcePlan(
        deployment_name=deployment_name_for(deployment, config),
        predictors=predictors,
    )
    structured_log(
        "info",
        "Planned resource names",
        deployment_name=deployment.name,
        operation="plan_resource_names",
        metadata={
            "predictors": [p.predictor_name for p in predictors],
            "component_deployments": sum(len(p.component_deployment_names) for p in predictors),
        },
        logger=logger,
    )
    return plan
