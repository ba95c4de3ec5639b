"""Prescribed stress imposed on the momentum equation at a boundary face."""

from __future__ import annotations

_AXES = {"x": 0, "y": 1, "z": 2}


def _component_index(component) -> int:
    if isinstance(component, str):
        try:
            return _AXES[component.lower()]
        except KeyError:
            raise ValueError(f"Unknown momentum component {component!r}.") from None
    index = int(component)
    if index not in (0, 1, 2):
        raise ValueError(f"Momentum component must be 0, 1 or 2, got {component!r}.")
    return index


def stress_boundary_flux(normal, component, value, face_area=1.0, face_coord=1.0) -> float:
    """Momentum flux of a stress ``value`` through a face with outward ``normal``.

    ``component`` selects the momentum equation (0, 1, 2 or "x", "y", "z");
    the result is ``normal[component] * value`` times the face area and
    coordinate factor.
    """
    index = _component_index(component)
    components = tuple(float(c) for c in normal)
    if len(components) > 3:
        raise ValueError("A face normal may have at most three components.")
    components += (0.0,) * (3 - len(components))
    strong_residual = components[index] * value
    return strong_residual * (face_area * face_coord)