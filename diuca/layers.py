"""Layer identification along a direction and per-layer material parameters."""

from __future__ import annotations

import math
from bisect import bisect_right
from typing import Any, Mapping, Sequence


class LayerError(ValueError):
    """Raised for inconsistent layer definitions or unknown layer ids."""


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class UniformLayer:
    """Assigns layer ids to points by projecting them onto a direction.

    ``interfaces`` are the upper bounds of the layers along the direction;
    a point belongs to the first layer whose interface lies strictly above
    its projected distance.
    """

    def __init__(self, interfaces, layer_ids=None, direction=(1.0, 0.0, 0.0)):
        self.interfaces = list(interfaces)
        components = tuple(float(c) for c in direction)
        if len(components) > 3:
            raise LayerError("The direction vector may have at most three components.")
        components += (0.0,) * (3 - len(components))
        norm = math.sqrt(sum(c * c for c in components))
        if norm == 0:
            raise LayerError("The supplied direction vector is not valid, it has a zero norm.")
        self.direction = tuple(c / norm for c in components)

        ids = list(layer_ids) if layer_ids else list(range(len(self.interfaces)))
        if len(ids) != len(self.interfaces):
            raise LayerError("The number of 'interfaces' must match the number of 'layer_ids'.")
        self.layer_ids = ids

    def layer_id(self, point):
        """Return the layer id of a point (node position or element centroid)."""
        coords = tuple(point)
        if len(coords) > 3:
            raise LayerError("A point may have at most three components.")
        distance = sum(d * c for d, c in zip(self.direction, coords))
        index = bisect_right(self.interfaces, distance)
        if index == len(self.interfaces):
            raise LayerError("Failed to locate an interface within the domain.")
        return self.layer_ids[index]


class LayerParameter:
    """Per-point values of one layered parameter, looked up from input data."""

    def __init__(self, data):
        self._data = list(data)
        self._values: list[Any] = []

    def resize(self, n):
        """Resize the per-point storage to ``n`` entries, keeping existing ones."""
        self._values = (self._values + [None] * n)[:n]

    def reinit(self, qp, idx):
        """Set the value at point ``qp`` to the input entry at ``idx``."""
        self._values[qp] = self._data[idx]

    def values(self):
        """The current per-point values."""
        return tuple(self._values)


class LayeredMaterial:
    """A material whose parameters are given per layer and picked by layer id."""

    def __init__(self, name, layer_ids, params=None):
        self.name = name
        self.layer_ids = list(layer_ids)
        if not self.layer_ids:
            raise LayerError(f"The \"layer_ids\" parameter of the \"{name}\" block is empty.")
        self._params: dict[str, Sequence[Any]] = dict(params or {})
        self._params["layer_ids"] = self.layer_ids
        self._index: dict[int, int] = {
            layer: position for position, layer in enumerate(self.layer_ids)
        }
        self._layer_data: list[LayerParameter] = []
        self.layer_id = self.get_layer_param("layer_ids")

    def get_layer_param(self, param_name):
        """Register the named per-layer input parameter and return its holder."""
        if param_name not in self._params:
            raise LayerError(
                f"The parameter \"{param_name}\" is not defined in the \"{self.name}\" block."
            )
        data = self._params[param_name]
        if len(data) != len(self.layer_ids):
            raise LayerError(
                f"The parameter \"{param_name}\" in the \"{self.name}\" block must be the "
                "same length as the \"layer_ids\" parameter."
            )
        return self.add_layer_vector(data)

    def add_layer_vector(self, data):
        """Register computed per-layer data and return its holder."""
        if len(data) != len(self.layer_ids):
            raise LayerError(
                f"The data in the \"{self.name}\" block supplied with the add_layer_vector "
                "method must be the same length as the \"layer_ids\" parameter."
            )
        parameter = LayerParameter(data)
        self._layer_data.append(parameter)
        return parameter

    def compute_properties(self, layer_variable):
        """Fill every registered parameter from the layer variable values at each point."""
        values = list(layer_variable)
        indices = []
        for value in values:
            current = _round_half_away(value)
            idx = self._index.get(current)
            if idx is None:
                raise LayerError(
                    f"The current layer id variable value ({current}) was not provided in "
                    f"the 'layer_ids' parameter of the \"{self.name}\" block."
                )
            indices.append(idx)
        for parameter in self._layer_data:
            parameter.resize(len(values))
            for qp, idx in enumerate(indices):
                parameter.reinit(qp, idx)