"""Read-only traversals over a predictive unit graph.

All traversals are pre-order (a unit before its children, children left to
right) and use an explicit stack, so graph depth is not bounded by the
interpreter's recursion limit. Unit names are expected to be unique; when
they are not, searches return the first pre-order match.
"""

from __future__ import annotations

from typing import Iterator, Optional

from seldon_topology.core.errors import DuplicateUnitNameError
from seldon_topology.models.constants import LOCAL_ENGINE_HOST
from seldon_topology.models.graph import PredictiveUnit, PredictiveUnitType


def iter_units(root: PredictiveUnit) -> Iterator[PredictiveUnit]:
    """Yield every unit of the graph in pre-order."""
    stack = [root]
    while stack:
        unit = stack.pop()
        yield unit
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(unit.children or []))


def find_unit_by_name(root: PredictiveUnit, name: str) -> Optional[PredictiveUnit]:
    for unit in iter_units(root):
        if unit.name == name:
            return unit
    return None


def find_local_engine_unit(root: PredictiveUnit) -> Optional[PredictiveUnit]:
    """First unit bound to localhost, i.e. sharing a pod with the engine."""
    for unit in iter_units(root):
        if unit.endpoint is not None and unit.endpoint.service_host == LOCAL_ENGINE_HOST:
            return unit
    return None


def flatten_graph(root: PredictiveUnit) -> list[PredictiveUnit]:
    return list(iter_units(root))


def find_units_by_type(root: PredictiveUnit, unit_type: PredictiveUnitType) -> list[PredictiveUnit]:
    return [u for u in iter_units(root) if u.type is not None and u.type == unit_type]


def duplicate_unit_names(root: PredictiveUnit) -> list[str]:
    """Names used by more than one unit, in first-seen order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for unit in iter_units(root):
        if unit.name in seen and unit.name not in duplicates:
            duplicates.append(unit.name)
        seen.add(unit.name)
    return duplicates


def validate_unique_names(root: PredictiveUnit) -> None:
    """Raise DuplicateUnitNameError if any unit name repeats."""
    duplicates = duplicate_unit_names(root)
    if duplicates:
        raise DuplicateUnitNameError(duplicates)
