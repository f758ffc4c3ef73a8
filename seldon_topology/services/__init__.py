"""Services: name derivation, graph traversal, resource planning."""

from seldon_topology.services.graph import (
    duplicate_unit_names,
    find_local_engine_unit,
    find_unit_by_name,
    find_units_by_type,
    flatten_graph,
    iter_units,
    validate_unique_names,
)
from seldon_topology.services.naming import (
    bound_name,
    container_service_name,
    deployment_name,
    explainer_deployment_name,
    get_naming_config,
    hash_name,
    pod_spec_deployment_name,
    predictor_key,
    service_orchestrator_name,
)
from seldon_topology.services.resource_plan import (
    DeploymentResourcePlan,
    PredictorResourcePlan,
    parameters_env_value,
    plan_resource_names,
    unit_env,
    unit_labels,
)

__all__ = [
    "duplicate_unit_names",
    "find_local_engine_unit",
    "find_unit_by_name",
    "find_units_by_type",
    "flatten_graph",
    "iter_units",
    "validate_unique_names",
    "bound_name",
    "container_service_name",
    "deployment_name",
    "explainer_deployment_name",
    "get_naming_config",
    "hash_name",
    "pod_spec_deployment_name",
    "predictor_key",
    "service_orchestrator_name",
    "DeploymentResourcePlan",
    "PredictorResourcePlan",
    "parameters_env_value",
    "plan_resource_names",
    "unit_env",
    "unit_labels",
]
