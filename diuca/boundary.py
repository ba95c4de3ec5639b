"""Hydrostatic sea-water pressure applied on a submerged boundary."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class OceanPressure:
    """Hydrostatic pressure of a water column of height ``water_height`` (z upwards)."""

    water_density: float = 1028.0
    g: float = 9.81
    water_height: float = 0.0

    def pressure(self, z):
        """Hydrostatic pressure at elevation ``z``."""
        return self.water_density * self.g * (self.water_height - z)

    def residual(self, test, normal, point):
        """Residual contribution ``test * normal * p`` at a point; zero at or above z = 0."""
        coords = tuple(point)
        z = coords[2] if len(coords) > 2 else 0.0
        normal = tuple(normal)
        if z < 0:
            factor = test * self.pressure(z)
            return tuple(factor * n for n in normal)
        return tuple(0.0 for _ in normal)