"""Deterministic, length-bounded names for the resources of a Seldon deployment.

Every deriver joins its identifying components with "-" in a fixed order. A
candidate longer than ``max_length`` (63, the DNS label limit) is replaced by
``<hash_prefix>-<hex digest of the full candidate>``; a candidate of exactly
``max_length`` characters is kept as is. The derivers never raise: ``None``
components are treated as empty strings.
"""

from __future__ import annotations

import hashlib
import logging
from functools import lru_cache
from typing import Iterable, Mapping, Optional

from seldon_topology.core.config import get_settings
from seldon_topology.core.logging import structured_log
from seldon_topology.models.constants import NamingConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_naming_config() -> NamingConfig:
    """Return the naming table built from cached settings."""
    return NamingConfig.from_settings(get_settings())


def _resolve(config: Optional[NamingConfig]) -> NamingConfig:
    return config if config is not None else get_naming_config()


def hash_name(text: str, algorithm: str = "blake2b") -> str:
    """Hex-encoded 128-bit digest of text."""
    data = (text or "").encode("utf-8")
    if algorithm == "md5":
        return hashlib.md5(data, usedforsecurity=False).hexdigest()
    return hashlib.blake2b(data, digest_size=16).hexdigest()


def bound_name(candidate: str, config: Optional[NamingConfig] = None) -> str:
    """Apply the length policy to a fully built candidate name.

    Length is counted in UTF-8 bytes. Non-ASCII candidates are always hashed
    so the result is ASCII-safe.
    """
    cfg = _resolve(config)
    byte_length = len(candidate.encode("utf-8"))
    if byte_length <= cfg.max_length and candidate.isascii():
        return candidate
    hashed = f"{cfg.hash_prefix}-{hash_name(candidate, cfg.hash_algorithm)}"
    structured_log(
        "debug",
        "Derived name over length limit or not ASCII, using hashed name",
        operation="bound_name",
        metadata={"candidate": candidate, "length": byte_length, "name": hashed},
        logger=logger,
    )
    return hashed


def _join(*parts: Optional[object]) -> str:
    return "-".join("" if p is None else str(p) for p in parts)


def join_container_names(container_names: Iterable[Optional[str]]) -> str:
    """Container names joined with '-' in declared order."""
    return "-".join(n or "" for n in container_names)


def deployment_name(name: Optional[str], config: Optional[NamingConfig] = None) -> str:
    """Name of the deployment itself."""
    return bound_name(name or "", config)


def explainer_deployment_name(
    deployment: Optional[str],
    predictor: Optional[str],
    config: Optional[NamingConfig] = None,
) -> str:
    """<deployment>-<predictor><explainer suffix>."""
    cfg = _resolve(config)
    return bound_name(_join(deployment, predictor) + cfg.explainer_suffix, cfg)


def pod_spec_deployment_name(
    deployment: Optional[str],
    predictor: Optional[str],
    index: int,
    pod_spec_name: Optional[str] = None,
    container_names: Iterable[Optional[str]] = (),
    config: Optional[NamingConfig] = None,
) -> str:
    """<deployment>-<predictor>-<index>-<pod spec name>.

    When the pod spec carries no name, the container names joined with '-'
    take its place.
    """
    suffix = pod_spec_name if pod_spec_name else join_container_names(container_names)
    return bound_name(_join(deployment, predictor, index, suffix), config)


def service_orchestrator_name(
    deployment: Optional[str],
    predictor: Optional[str],
    config: Optional[NamingConfig] = None,
) -> str:
    cfg = _resolve(config)
    return bound_name(_join(deployment, predictor) + cfg.svc_orch_suffix, cfg)


def predictor_key(
    deployment: Optional[str],
    predictor: Optional[str],
    annotations: Optional[Mapping[str, str]] = None,
    config: Optional[NamingConfig] = None,
) -> str:
    """Service name for a predictor.

    The custom service-name annotation, when present, is returned verbatim and
    skips the length policy.
    """
    cfg = _resolve(config)
    if annotations and cfg.custom_svc_name_annotation in annotations:
        return annotations[cfg.custom_svc_name_annotation]
    return bound_name(_join(deployment, predictor), cfg)


def container_service_name(
    deployment: Optional[str],
    predictor: Optional[str],
    container: Optional[str],
    config: Optional[NamingConfig] = None,
) -> str:
    return bound_name(_join(deployment, predictor, container), config)
