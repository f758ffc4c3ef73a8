"""Pydantic models for SeldonDeployment manifests.

Only the fields that name derivation and graph lookup read are typed; pod,
autoscaling, disruption-budget and explainer container specs are kept as
opaque dicts and passed through untouched.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seldon_topology.models.graph import Endpoint, PredictiveUnit


Protocol = Literal["seldon", "tensorflow", "kfserving"]
Transport = Literal["rest", "grpc"]
ServerType = Literal["rpc", "kafka"]

AlibiExplainerType = Literal[
    "AnchorTabular",
    "AnchorImages",
    "AnchorText",
    "Counterfactuals",
    "Contrastive",
    "KernelShap",
    "IntegratedGradients",
    "ALE",
    "TreeShap",
]


class _ManifestModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        protected_namespaces=(),
    )


class ObjectMeta(_ManifestModel):
    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)


class Container(BaseModel):
    """Container entry of a pod spec; everything beyond name is passed through."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = ""


class PodSpec(_ManifestModel):
    containers: list[Container] = Field(default_factory=list)


class SeldonPodSpec(_ManifestModel):
    """One componentSpec: a pod template plus optional scaling specs."""

    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: PodSpec = Field(default_factory=PodSpec)
    hpa_spec: Optional[dict[str, Any]] = Field(default=None, alias="hpaSpec")
    keda_spec: Optional[dict[str, Any]] = Field(default=None, alias="kedaSpec")
    pdb_spec: Optional[dict[str, Any]] = Field(default=None, alias="pdbSpec")
    replicas: Optional[int] = None

    @property
    def container_names(self) -> list[str]:
        return [c.name for c in self.spec.containers]


class Explainer(_ManifestModel):
    type: Optional[AlibiExplainerType] = None
    model_uri: str = Field(default="", alias="modelUri")
    service_account_name: str = Field(default="", alias="serviceAccountName")
    container_spec: dict[str, Any] = Field(default_factory=dict, alias="containerSpec")
    config: dict[str, str] = Field(default_factory=dict)
    endpoint: Optional[Endpoint] = None
    env_secret_ref_name: str = Field(default="", alias="envSecretRefName")


class PredictorSpec(_ManifestModel):
    name: str
    graph: PredictiveUnit
    component_specs: list[SeldonPodSpec] = Field(default_factory=list, alias="componentSpecs")
    replicas: Optional[int] = None
    annotations: dict[str, str] = Field(default_factory=dict)
    labels: dict[str, str] = Field(default_factory=dict)
    engine_resources: dict[str, Any] = Field(default_factory=dict, alias="engineResources")
    svc_orch_spec: dict[str, Any] = Field(default_factory=dict, alias="svcOrchSpec")
    traffic: int = 0
    explainer: Optional[Explainer] = None
    shadow: bool = False

    @field_validator("graph", mode="before")
    @classmethod
    def build_graph(cls, v: Any) -> Any:
        return PredictiveUnit.from_manifest(v)


class SeldonDeploymentSpec(_ManifestModel):
    name: str = ""  # deprecated, metadata.name is authoritative
    default_predictor: str = Field(default="", alias="defaultPredictor")
    predictors: list[PredictorSpec] = Field(default_factory=list)
    oauth_key: str = ""
    oauth_secret: str = ""
    annotations: dict[str, str] = Field(default_factory=dict)
    protocol: Optional[Protocol] = None
    transport: Optional[Transport] = None
    replicas: Optional[int] = None
    server_type: Optional[ServerType] = Field(default=None, alias="serverType")


class SeldonDeployment(_ManifestModel):
    """A SeldonDeployment custom resource (spec only; status is not modelled)."""

    api_version: str = Field(default="machinelearning.seldon.io/v1", alias="apiVersion")
    kind: str = "SeldonDeployment"
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: SeldonDeploymentSpec = Field(default_factory=SeldonDeploymentSpec)

    @property
    def name(self) -> str:
        return self.metadata.name

    @classmethod
    def from_manifest(cls, manifest: dict[str, Any]) -> "SeldonDeployment":
        """Build from a parsed YAML/JSON manifest; raises pydantic ValidationError.

        Predictor graphs are built with PredictiveUnit.from_manifest, so graph
        depth is unbounded.
        """
        return cls.model_validate(manifest)

    def get_predictor(self, name: str) -> Optional[PredictorSpec]:
        for predictor in self.spec.predictors:
            if predictor.name == name:
                return predictor
        return None
