"""Label, annotation and env-var names used by Seldon deployments, plus the naming table."""

from __future__ import annotations

from dataclasses import dataclass

from seldon_topology.core.config import HASH_HEX_LENGTH, Settings
from seldon_topology.core.errors import InvalidNamingConfigError

# ── Labels ───────────────────────────────────────────────────────────────────
LABEL_SELDON_ID = "seldon-deployment-id"
LABEL_ROUTER = "seldon.io/router"
LABEL_COMBINER = "seldon.io/combiner"
LABEL_MODEL = "seldon.io/model"
LABEL_TRANSFORMER = "seldon.io/transformer"
LABEL_OUTPUT_TRANSFORMER = "seldon.io/output-transformer"
LABEL_MANAGED_BY = "app.kubernetes.io/managed-by"
LABEL_VALUE_SELDON = "seldon-core"

# Predictive unit type -> pod label marking the role
UNIT_TYPE_LABELS: dict[str, str] = {
    "ROUTER": LABEL_ROUTER,
    "COMBINER": LABEL_COMBINER,
    "MODEL": LABEL_MODEL,
    "TRANSFORMER": LABEL_TRANSFORMER,
    "OUTPUT_TRANSFORMER": LABEL_OUTPUT_TRANSFORMER,
}

# ── Env vars injected into unit containers ───────────────────────────────────
ENV_PREDICTIVE_UNIT_SERVICE_PORT = "PREDICTIVE_UNIT_SERVICE_PORT"
ENV_PREDICTIVE_UNIT_HTTP_SERVICE_PORT = "PREDICTIVE_UNIT_HTTP_SERVICE_PORT"
ENV_PREDICTIVE_UNIT_GRPC_SERVICE_PORT = "PREDICTIVE_UNIT_GRPC_SERVICE_PORT"
ENV_PREDICTIVE_UNIT_PARAMETERS = "PREDICTIVE_UNIT_PARAMETERS"
ENV_PREDICTIVE_UNIT_ID = "PREDICTIVE_UNIT_ID"
ENV_PREDICTOR_ID = "PREDICTOR_ID"
ENV_SELDON_DEPLOYMENT_ID = "SELDON_DEPLOYMENT_ID"

# ── Annotations ──────────────────────────────────────────────────────────────
ANNOTATION_CUSTOM_SVC_NAME = "seldon.io/svc-name"

# Host the mutating webhook sets on the unit that shares a pod with the engine
LOCAL_ENGINE_HOST = "localhost"


@dataclass(frozen=True)
class NamingConfig:
    """Immutable table of everything name derivation depends on."""

    max_length: int = 63
    hash_prefix: str = "seldon"
    hash_algorithm: str = "blake2b"
    explainer_suffix: str = "-explainer"
    svc_orch_suffix: str = "-svc-orch"
    custom_svc_name_annotation: str = ANNOTATION_CUSTOM_SVC_NAME

    def __post_init__(self) -> None:
        if self.hash_algorithm not in ("blake2b", "md5"):
            raise InvalidNamingConfigError(
                f"Unsupported hash algorithm: {self.hash_algorithm}",
                details={"hash_algorithm": self.hash_algorithm},
            )
        hashed_length = len(self.hash_prefix) + 1 + HASH_HEX_LENGTH
        if hashed_length > self.max_length:
            raise InvalidNamingConfigError(
                f"Hashed names would be {hashed_length} chars, over the {self.max_length} limit",
                details={"hash_prefix": self.hash_prefix, "max_length": self.max_length},
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "NamingConfig":
        return cls(
            max_length=settings.name_max_length,
            hash_prefix=settings.name_hash_prefix,
            hash_algorithm=settings.name_hash_algorithm,
            explainer_suffix=settings.explainer_name_suffix,
            svc_orch_suffix=settings.svc_orch_name_suffix,
            custom_svc_name_annotation=settings.custom_svc_name_annotation,
        )


DEFAULT_NAMING_CONFIG = NamingConfig()
