"""Glen's-law ice and sediment rheology, layered soil elasticity, damage and response spectra."""

__version__ = "0.1.0"