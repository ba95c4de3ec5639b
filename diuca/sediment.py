"""Rheology of the sediment layer beneath ice: slip and Drucker-Prager laws."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from diuca.ice import effective_strain_rate

_CONSTANT_VISCOSITY = 1e10


class SlidingLaw(str, Enum):
    """Model used for the deformation of the sediment layer."""

    GUDMUNDSSON_RAYMOND = "GudmundssonRaymond"
    DRUCKER_PRAGER = "DruckerPrager"
    CONSTANT = "Constant"


def slip_viscosity(layer_thickness, slipperiness_coefficient) -> float:
    """Equivalent viscosity of a slip layer: thickness over slipperiness."""
    if slipperiness_coefficient == 0:
        raise ValueError("The slipperiness coefficient must not be zero.")
    return layer_thickness / slipperiness_coefficient


def drucker_prager_viscosity(
    grad_u, grad_v, grad_w, pressure, friction_coefficient=1.0, ii_eps_min=1e-25
) -> float:
    """Viscosity of a frictional sediment: ``friction * pressure / sqrt(II_eps)``.

    The strain-rate invariant is raised to ``ii_eps_min`` before use; a missing
    gradient counts as zero.
    """
    if ii_eps_min <= 0:
        raise ValueError("The finite strain rate parameter 'II_eps_min' must be positive.")
    ii_eps = max(effective_strain_rate(grad_u, grad_v, grad_w), ii_eps_min)
    eps_e = math.sqrt(ii_eps)
    return friction_coefficient * pressure / abs(eps_e)


@dataclass
class SedimentMaterial:
    """Sediment with SI defaults (kg m-3, m, Pa s); every parameter may change at run time."""

    density: float = 1850.0
    friction_coefficient: float = 1.0
    slipperiness_coefficient: float = 1.0
    layer_thickness: float = 1.0
    ii_eps_min: float = 1e-25
    sliding_law: SlidingLaw | str = SlidingLaw.GUDMUNDSSON_RAYMOND

    def __post_init__(self) -> None:
        try:
            self.sliding_law = SlidingLaw(self.sliding_law)
        except ValueError:
            raise ValueError(
                f"Unknown sliding law {self.sliding_law!r}; expected one of "
                + ", ".join(law.value for law in SlidingLaw)
            ) from None

    def viscosity(self, grad_u=None, grad_v=None, grad_w=None, pressure=0.0) -> float:
        """Sediment viscosity under the selected sliding law."""
        law = SlidingLaw(self.sliding_law)
        if law is SlidingLaw.GUDMUNDSSON_RAYMOND:
            return slip_viscosity(self.layer_thickness, self.slipperiness_coefficient)
        if law is SlidingLaw.DRUCKER_PRAGER:
            return drucker_prager_viscosity(
                grad_u, grad_v, grad_w, pressure, self.friction_coefficient, self.ii_eps_min
            )
        return _CONSTANT_VISCOSITY