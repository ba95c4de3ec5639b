"""Scalar damage model for ice driven by the von Mises stress."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _as_matrix(stress) -> list[list[float]]:
    rows = [list(map(float, row)) for row in stress]
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("The stress must be a 3x3 tensor.")
    return rows


def von_mises_stress(stress) -> float:
    """Von Mises equivalent stress of a 3x3 stress tensor."""
    s = _as_matrix(stress)
    trace = s[0][0] + s[1][1] + s[2][2]
    dev = [
        [s[i][j] - (trace / 3.0 if i == j else 0.0) for j in range(3)] for i in range(3)
    ]
    contraction = sum(dev[i][j] * dev[i][j] for i in range(3) for j in range(3))
    return math.sqrt(1.5 * contraction)


@dataclass
class IceDamage:
    """Damage law parameters: exponent ``r``, rate ``B``, threshold and stress weight."""

    r: float = 0.43
    B: float = 1.0
    sig_th: float = 0.11
    alpha: float = 1.0

    def update(self, stress, damage_old, dt) -> float:
        """Damage after a step of ``dt`` from ``damage_old`` under ``stress``."""
        xi = self.alpha * von_mises_stress(stress)
        damage_rate = self.B * (xi - damage_old)
        return damage_old + dt * damage_rate