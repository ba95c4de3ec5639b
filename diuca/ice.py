"""Ice rheology following Glen's flow law."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_ZERO = (0.0, 0.0, 0.0)


def _gradient(grad: Sequence[float] | None) -> tuple[float, float, float]:
    if grad is None:
        return _ZERO
    components = tuple(float(c) for c in grad)
    if len(components) > 3:
        raise ValueError("A velocity gradient may have at most three components.")
    return components + (0.0,) * (3 - len(components))


def effective_strain_rate(grad_u, grad_v=None, grad_w=None) -> float:
    """Second invariant of the strain-rate tensor from the velocity gradients.

    A missing gradient (lower mesh dimension) counts as zero.
    """
    u_x, u_y, u_z = _gradient(grad_u)
    v_x, v_y, v_z = _gradient(grad_v)
    w_x, w_y, w_z = _gradient(grad_w)

    eps_xy = 0.5 * (u_y + v_x)
    eps_xz = 0.5 * (u_z + w_x)
    eps_yz = 0.5 * (v_z + w_y)

    return 0.5 * (
        u_x * u_x
        + v_y * v_y
        + w_z * w_z
        + 2.0 * (eps_xy * eps_xy + eps_xz * eps_xz + eps_yz * eps_yz)
    )


def _check_parameters(a_glen, n_glen, ii_eps_min) -> None:
    if a_glen <= 0:
        raise ValueError("The fluidity parameter 'AGlen' must be positive.")
    if n_glen <= 0:
        raise ValueError("The Glen exponent 'nGlen' must be positive.")
    if ii_eps_min <= 0:
        raise ValueError("The finite strain rate parameter 'II_eps_min' must be positive.")


def glen_viscosity(ii_eps, a_glen, n_glen, ii_eps_min, min_viscosity) -> float:
    """Viscosity from Glen's flow law for the strain-rate invariant ``ii_eps``.

    The invariant is raised to ``ii_eps_min`` to avoid infinite viscosity at
    low strain rates, and the result is never below ``min_viscosity``.
    """
    _check_parameters(a_glen, n_glen, ii_eps_min)
    ii_eps = max(ii_eps, ii_eps_min)
    ap_glen = a_glen ** (-1.0 / n_glen)
    mu = 0.5 * ap_glen * ii_eps ** (-(1.0 - 1.0 / n_glen) / 2.0)
    return max(mu, min_viscosity)


@dataclass
class IceMaterial:
    """Ice with Glen's flow law parameters; defaults are in SI units (Pa, s, kg m-3)."""

    a_glen: float = 2.378234398782344e-24
    n_glen: float = 3.0
    density: float = 917.0
    ii_eps_min: float = 1e-25
    min_viscosity: float = 3.153600e09

    @classmethod
    def annual(cls) -> "IceMaterial":
        """Parameters in MPa and years (viscosity in MPa a)."""
        return cls(
            a_glen=75.0,
            n_glen=3.0,
            density=917.0,
            ii_eps_min=5.98e-6,
            min_viscosity=0.0001,
        )

    @classmethod
    def si(cls) -> "IceMaterial":
        """Parameters in SI units (viscosity in Pa s)."""
        return cls()

    def viscosity(self, grad_u, grad_v=None, grad_w=None) -> float:
        """Viscosity for the given velocity gradients."""
        return glen_viscosity(
            effective_strain_rate(grad_u, grad_v, grad_w),
            self.a_glen,
            self.n_glen,
            self.ii_eps_min,
            self.min_viscosity,
        )

    def max_viscosity(self) -> float:
        """Largest viscosity the law yields, reached at the minimum strain rate."""
        _check_parameters(self.a_glen, self.n_glen, self.ii_eps_min)
        return (
            0.5
            * self.a_glen ** (-1.0 / self.n_glen)
            * self.ii_eps_min ** (-(1.0 - 1.0 / self.n_glen) / 2.0)
        )