"""Material with constant density and viscosity exposed as functor properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class ConstantMaterial:
    """Constant density (kg m-3) and viscosity (Pa s); both may be changed at run time."""

    density: float = 1.0
    viscosity: float = 1.0

    def functor_properties(self) -> dict[str, Callable[[Any, Any], float]]:
        """Functors for ``rho_material`` and ``mu_material``, taking (space, time) arguments.

        The functors read the current attribute values at each call.
        """

        def rho(_space: Any, _time: Any) -> float:
            return self.density

        def mu(_space: Any, _time: Any) -> float:
            return self.viscosity

        return {"rho_material": rho, "mu_material": mu}