"""Isotropic elasticity of a layered soil, with shear and P wave speeds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from diuca.layers import LayeredMaterial, LayerError

Tensor4 = tuple[tuple[tuple[tuple[float, ...], ...], ...], ...]


def _delta(i: int, j: int) -> float:
    return 1.0 if i == j else 0.0


def isotropic_elasticity_tensor(lame_lambda, shear_modulus) -> Tensor4:
    """Symmetric isotropic rank-four elasticity tensor as nested 3x3x3x3 tuples.

    ``C[i][j][k][l] = lambda d_ij d_kl + G (d_ik d_jl + d_il d_jk)``.
    """
    axes = range(3)
    return tuple(
        tuple(
            tuple(
                tuple(
                    lame_lambda * _delta(i, j) * _delta(k, l)
                    + shear_modulus * (_delta(i, k) * _delta(j, l) + _delta(i, l) * _delta(j, k))
                    for l in axes
                )
                for k in axes
            )
            for j in axes
        )
        for i in axes
    )


def shear_modulus_from_elastic(elastic_modulus, poissons_ratio) -> list[float]:
    """Shear moduli ``E / (2 (1 + nu))`` for paired elastic moduli and Poisson's ratios."""
    elastic = list(elastic_modulus)
    ratios = list(poissons_ratio)
    if len(elastic) != len(ratios):
        raise LayerError(
            "The 'elastic_modulus' and 'poissons_ratio' parameters must have the same length."
        )
    return [e / (2.0 * (1.0 + nu)) for e, nu in zip(elastic, ratios)]


@dataclass(frozen=True)
class SoilPointProperties:
    """Soil properties computed at one point."""

    layer_id: int
    shear_modulus: float
    poissons_ratio: float
    density: float
    p_wave_modulus: float
    shear_wave_speed: Optional[float]
    p_wave_speed: Optional[float]
    elasticity_tensor: Tensor4
    effective_stiffness: float


class SoilElasticity:
    """Layered soil given per layer by Poisson's ratio, density and one stiffness modulus.

    Exactly one of ``shear_modulus`` and ``elastic_modulus`` must be given.
    """

    def __init__(
        self,
        name,
        layer_ids,
        poissons_ratio,
        density,
        shear_modulus=None,
        elastic_modulus=None,
        wave_speed_calculation=True,
        scale_factor_density=1.0,
    ):
        self.name = name
        if shear_modulus is not None and elastic_modulus is not None:
            raise LayerError(
                f"In block {name}. Please provide ONE of the parameters, 'shear_modulus' and "
                "'elastic_modulus', but not both."
            )
        if shear_modulus is None and elastic_modulus is None:
            raise LayerError(
                f"In block {name}. Please provide ONE of the parameters, 'shear_modulus' or "
                "'elastic_modulus'."
            )

        params = {"poissons_ratio": list(poissons_ratio), "density": list(density)}
        if shear_modulus is not None:
            params["shear_modulus"] = list(shear_modulus)
        self._material = LayeredMaterial(name, layer_ids, params)

        if shear_modulus is not None:
            self._shear = self._material.get_layer_param("shear_modulus")
        else:
            self._shear = self._material.add_layer_vector(
                shear_modulus_from_elastic(elastic_modulus, params["poissons_ratio"])
            )
        self._density = self._material.get_layer_param("density")
        self._poisson = self._material.get_layer_param("poissons_ratio")
        self.wave_speed_calculation = bool(wave_speed_calculation)
        self.scale_factor_density = scale_factor_density

    def compute(self, layer_variable) -> list[SoilPointProperties]:
        """Properties at each point, given the layer variable value there."""
        self._material.compute_properties(layer_variable)
        points = zip(
            self._material.layer_id.values(),
            self._shear.values(),
            self._density.values(),
            self._poisson.values(),
        )
        return [self._point(*values) for values in points]

    def _point(self, layer_id, shear, layer_density, nu) -> SoilPointProperties:
        p_wave_modulus = shear * 2.0 * (1.0 - nu) / (1.0 - 2.0 * nu)
        density = layer_density * self.scale_factor_density

        shear_speed = p_speed = None
        if self.wave_speed_calculation:
            shear_speed = math.sqrt(shear / density)
            p_speed = math.sqrt(p_wave_modulus / density)

        tensor = isotropic_elasticity_tensor(p_wave_modulus - 2.0 * shear, shear)

        elastic_modulus = shear * 2.0 * (1.0 + nu)
        effective = max(
            math.sqrt(elastic_modulus * (1 - nu) / ((1 + nu) * (1 - 2 * nu))),
            math.sqrt(elastic_modulus / (2 * (1 + nu))),
        )
        return SoilPointProperties(
            layer_id=layer_id,
            shear_modulus=shear,
            poissons_ratio=nu,
            density=density,
            p_wave_modulus=p_wave_modulus,
            shear_wave_speed=shear_speed,
            p_wave_speed=p_speed,
            elasticity_tensor=tensor,
            effective_stiffness=effective,
        )