"""Strain rates and stresses of ice flowing under Glen's law."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from diuca.ice import IceMaterial

Vector = tuple[float, float, float]
_ZERO: Vector = (0.0, 0.0, 0.0)


def _vector(values: Sequence[float] | None) -> Vector:
    if values is None:
        return _ZERO
    components = tuple(float(c) for c in values)
    if len(components) > 3:
        raise ValueError("A velocity gradient may have at most three components.")
    padded = components + (0.0,) * (3 - len(components))
    return (padded[0], padded[1], padded[2])


@dataclass(frozen=True)
class IceStress:
    """Strain rates, viscosity and stresses at one point.

    ``sig_x`` holds (xx, xy, xz), ``sig_y`` holds (yy, yx, yz) and
    ``sig_z`` holds (zz, zx, zy).
    """

    density: float
    viscosity: float
    eps_xx: float
    eps_yy: float
    eps_zz: float
    eps_xy: float
    eps_xz: float
    eps_yz: float
    sig_x: Vector
    sig_y: Vector
    sig_z: Vector

    @property
    def sig_xx(self) -> float:
        return self.sig_x[0]

    @property
    def sig_yy(self) -> float:
        return self.sig_y[0]

    @property
    def sig_zz(self) -> float:
        return self.sig_z[0]

    @property
    def sig_xy(self) -> float:
        return self.sig_x[1]

    @property
    def sig_xz(self) -> float:
        return self.sig_x[2]

    @property
    def sig_yz(self) -> float:
        return self.sig_y[2]


def ice_stress(material, grad_u, grad_v=None, grad_w=None, pressure=0.0, dimension=3) -> IceStress:
    """Stresses of ``material`` for the velocity gradients and mean stress ``pressure``.

    Gradients of velocity components beyond the mesh ``dimension`` are taken
    as zero, and so are the normal stresses along those axes.
    """
    if dimension not in (1, 2, 3):
        raise ValueError(f"The mesh dimension must be 1, 2 or 3, got {dimension!r}.")
    if not isinstance(material, IceMaterial):
        raise TypeError("The material must be an IceMaterial.")

    eps_x = _vector(grad_u)
    eps_y = _vector(grad_v) if dimension >= 2 else _ZERO
    eps_z = _vector(grad_w) if dimension == 3 else _ZERO

    eps_xy = 0.5 * (eps_x[1] + eps_y[0])
    eps_xz = 0.5 * (eps_x[2] + eps_z[0])
    eps_yz = 0.5 * (eps_y[2] + eps_z[1])

    mu = material.viscosity(eps_x, eps_y, eps_z)

    sig_xx = 2.0 * mu * eps_x[0] + pressure
    sig_yy = 2.0 * mu * eps_y[1] + pressure if dimension >= 2 else 0.0
    sig_zz = 2.0 * mu * eps_z[2] + pressure if dimension == 3 else 0.0

    return IceStress(
        density=material.density,
        viscosity=mu,
        eps_xx=eps_x[0],
        eps_yy=eps_y[1],
        eps_zz=eps_z[2],
        eps_xy=eps_xy,
        eps_xz=eps_xz,
        eps_yz=eps_yz,
        sig_x=(sig_xx, 2.0 * mu * eps_xy, 2.0 * mu * eps_xz),
        sig_y=(sig_yy, 2.0 * mu * eps_xy, 2.0 * mu * eps_yz),
        sig_z=(sig_zz, 2.0 * mu * eps_xz, 2.0 * mu * eps_yz),
    )