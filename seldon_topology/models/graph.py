"""Pydantic models for the predictive unit graph of a predictor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from seldon_topology.core.errors import InvalidParameterValueError


PredictiveUnitType = Literal[
    "UNKNOWN_TYPE",
    "ROUTER",
    "COMBINER",
    "MODEL",
    "TRANSFORMER",
    "OUTPUT_TRANSFORMER",
]

PredictiveUnitImplementation = Literal[
    "UNKNOWN_IMPLEMENTATION",
    "SIMPLE_MODEL",
    "SIMPLE_ROUTER",
    "RANDOM_ABTEST",
    "AVERAGE_COMBINER",
]

PredictiveUnitMethod = Literal[
    "TRANSFORM_INPUT",
    "TRANSFORM_OUTPUT",
    "ROUTE",
    "AGGREGATE",
    "SEND_FEEDBACK",
]

EndpointType = Literal["REST", "GRPC"]

ParameterType = Literal["INT", "FLOAT", "DOUBLE", "STRING", "BOOL"]

LoggerMode = Literal["all", "request", "response"]

_TRUE_VALUES = ("y", "yes", "t", "true", "on", "1")
_FALSE_VALUES = ("n", "no", "f", "false", "off", "0")


class _GraphModel(BaseModel):
    """Frozen base accepting both manifest keys and attribute names."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        protected_namespaces=(),
    )


class Endpoint(_GraphModel):
    """Network binding of a predictive unit."""

    service_host: str = ""
    service_port: int = 0
    type: Optional[EndpointType] = None
    http_port: int = Field(default=0, alias="httpPort")
    grpc_port: int = Field(default=0, alias="grpcPort")


class Parameter(_GraphModel):
    """A named, string-encoded unit parameter with its declared type."""

    name: str
    value: str
    type: ParameterType

    def typed_value(self) -> Union[int, float, bool, str]:
        """Convert value to the declared type."""
        raw = self.value.strip()
        try:
            if self.type == "INT":
                return int(raw)
            if self.type in ("FLOAT", "DOUBLE"):
                return float(raw)
        except ValueError as e:
            raise InvalidParameterValueError(self.name, self.value, self.type) from e
        if self.type == "BOOL":
            lowered = raw.lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise InvalidParameterValueError(self.name, self.value, self.type)
        return self.value


class PayloadLogger(_GraphModel):
    """Request/response payload logging side channel."""

    url: Optional[str] = None
    mode: Optional[LoggerMode] = None


class PredictiveUnit(_GraphModel):
    """One node of the inference graph; children are ordered."""

    name: str
    children: list[PredictiveUnit] = Field(default_factory=list)
    type: Optional[PredictiveUnitType] = None
    implementation: Optional[PredictiveUnitImplementation] = None
    methods: Optional[list[PredictiveUnitMethod]] = None
    endpoint: Optional[Endpoint] = None
    parameters: list[Parameter] = Field(default_factory=list)
    model_uri: str = Field(default="", alias="modelUri")
    service_account_name: str = Field(default="", alias="serviceAccountName")
    env_secret_ref_name: str = Field(default="", alias="envSecretRefName")
    logger: Optional[PayloadLogger] = None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def typed_parameters(self) -> dict[str, Any]:
        """Map parameter name -> converted value (last one wins on repeats)."""
        return {p.name: p.typed_value() for p in self.parameters}

    @classmethod
    def from_manifest(cls, data: Any) -> "PredictiveUnit":
        """Build a graph of any depth from parsed manifest data.

        Each node is validated on its own and children are attached bottom-up
        with an explicit stack, so depth is not bounded by pydantic's
        recursion guard. Raises pydantic ValidationError on malformed nodes.
        """
        if isinstance(data, cls):
            return data
        built: list[PredictiveUnit] = []
        stack: list[tuple[Any, bool]] = [(data, False)]
        while stack:
            node, expanded = stack.pop()
            if isinstance(node, cls):
                built.append(node)
                continue
            children = node.get("children") if isinstance(node, Mapping) else None
            if not isinstance(children, (list, tuple)):
                # Leaf, or a malformed node that validation will report
                built.append(cls.model_validate(node))
                continue
            if not expanded:
                stack.append((node, True))
                # Reversed so children are built left to right
                stack.extend((child, False) for child in reversed(children))
                continue
            count = len(children)
            kids = built[len(built) - count:] if count else []
            del built[len(built) - count:]
            unit = cls.model_validate({**node, "children": []})
            built.append(unit.model_copy(update={"children": kids}))
        return built[0]


PredictiveUnit.model_rebuild()
