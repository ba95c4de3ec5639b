# diuca

Material laws and helpers for modelling glacier ice flowing over sediment,
together with the seismic response-spectrum utilities used to post-process
nodal histories. Everything is plain Python with no third-party
dependencies; values are given as floats, sequences and tuples.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `diuca.ice`: Glen's flow law. `effective_strain_rate(grad_u, grad_v, grad_w)`
  gives the second invariant of the strain-rate tensor from velocity
  gradients (a missing gradient counts as zero), and `glen_viscosity`
  turns it into a viscosity, clamping the invariant from below at
  `ii_eps_min` and the viscosity at `min_viscosity`. `IceMaterial` holds the
  parameters; `IceMaterial.si()` (Pa, s) and `IceMaterial.annual()` (MPa,
  years) are ready-made sets. `IceMaterial.viscosity(...)` evaluates the law
  and `IceMaterial.max_viscosity()` gives the viscosity at the minimum
  strain rate.
- `diuca.stress`: `ice_stress(material, grad_u, grad_v, grad_w, pressure,
  dimension)` returns an `IceStress` with strain rates, viscosity and the
  stress vectors `sig_x`, `sig_y`, `sig_z` (plus `sig_xx`, `sig_xy`, ...
  properties). Components beyond the mesh dimension are taken as zero.
- `diuca.momentum`: `momentum_face_flux(stress, component, face_area,
  face_coord)` sums the stress contributions of an `IceStress` for the x, y
  or z momentum equation through a face.
- `diuca.free_surface`: `stress_boundary_flux(normal, component, value,
  face_area, face_coord)` is the flux of a prescribed stress through a
  boundary face.
- `diuca.sediment`: `slip_viscosity` (layer thickness over slipperiness)
  and `drucker_prager_viscosity` (friction times pressure over the square
  root of the strain-rate invariant). `SedimentMaterial` picks one through
  `sliding_law`, a `SlidingLaw` value (`GudmundssonRaymond`,
  `DruckerPrager` or `Constant`, the last giving 1e10).
- `diuca.constant`: `ConstantMaterial` with a density and viscosity;
  `functor_properties()` returns `rho_material` and `mu_material` callables
  of (space, time) that read the current values.
- `diuca.damage`: `von_mises_stress` of a 3x3 tensor and `IceDamage`, whose
  `update(stress, damage_old, dt)` advances a scalar damage value.
- `diuca.boundary`: `OceanPressure` gives the hydrostatic water pressure
  (`pressure(z)`) and its residual contribution on a boundary
  (`residual(test, normal, point)`), zero at or above z = 0.
- `diuca.layers`: `UniformLayer` assigns layer ids to points projected on a
  direction; `LayeredMaterial` and `LayerParameter` look up per-layer input
  values at each point from a layer-id variable.
- `diuca.elasticity`: `SoilElasticity` builds layered isotropic elasticity
  from Poisson's ratio, density and either shear or elastic modulus;
  `compute(layer_variable)` returns a `SoilPointProperties` per point with
  the elasticity tensor, P-wave modulus, wave speeds and effective stiffness.
  `isotropic_elasticity_tensor` and `shear_modulus_from_elastic` are
  available on their own.
- `diuca.spectra`: `ResponseHistoryBuilder` records nodal variable values
  step by step into vectors named `node_<id>_<variable>` and a `time`
  vector; `ResponseSpectraCalculator` regularizes those histories and
  computes `_sd`, `_sv` and `_sa` spectra for each one.
- `diuca.utils`: `response_spectrum` (returns a `Spectrum`), `regularize`,
  `mean`, `mean_history`, `median`, `percentile`, `standard_deviation`,
  `lognormal_standard_deviation`, `greater_probability`,
  `calc_log_likelihood`, `maximize_log_likelihood`, `check_equal`,
  `check_equal_size`, `is_negative_or_zero`, `zeropad`, `glob_files`,
  `adjust` and `log10`.

## Example

```python
from diuca.ice import IceMaterial
from diuca.stress import ice_stress
from diuca.momentum import momentum_face_flux

ice = IceMaterial.si()
mu = ice.viscosity((1e-10, 0.0, 0.0), (0.0, -1e-10, 0.0), (0.0, 0.0, 0.0))
print(mu, ice.max_viscosity())

state = ice_stress(ice, (1e-10, 0.0, 0.0), (0.0, -1e-10, 0.0), None, pressure=1e5, dimension=2)
print(momentum_face_flux(state, "x", face_area=2.0))
```

```python
from diuca.utils import regularize, response_spectrum

time, acc = regularize([0.0, 1.0, 0.0], [0.0, 0.1, 0.2], 0.01)
spectrum = response_spectrum(0.1, 10.0, 20, acc, 0.05, 0.01)
print(spectrum.frequency[0], spectrum.acceleration[0])
```

## Errors

Invalid input, such as mismatched vector lengths or non-positive
parameters, raises `ValueError`; layering problems raise `LayerError`, a
subclass of `ValueError`. Passing the wrong object type to `ice_stress` or
`momentum_face_flux` raises `TypeError`.

## What this package does not do

It evaluates material laws and fluxes at single points or faces. It has no
mesh, no solver, no input-file reader, no output writer and no command-line
program; assembling these pieces into a simulation is left to the caller.