"""Flux of the ice stress through a face, for one momentum component."""

from __future__ import annotations

from diuca.stress import IceStress

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


def momentum_face_flux(stress, component, face_area=1.0, face_coord=1.0) -> float:
    """Contribution of the ice ``stress`` through a face to one momentum equation.

    For x the xx, xy and xz stresses are added, for y the yy and yz stresses,
    and for z the zz stress; the sum is scaled by the face area and coordinate
    factor.
    """
    if not isinstance(stress, IceStress):
        raise TypeError("The stress must be an IceStress.")
    index = _component_index(component)
    if index == 0:
        parts = stress.sig_x
    elif index == 1:
        parts = (stress.sig_y[0], stress.sig_y[2])
    else:
        parts = (stress.sig_z[0],)
    factor = face_area * face_coord
    return sum(part * factor for part in parts)