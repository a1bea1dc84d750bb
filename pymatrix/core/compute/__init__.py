"""
Shared compute infrastructure for PyMatrix.

Submodules:
    kernels: Flat-buffer element-wise, product and transpose kernels
    random: Pluggable uniform random source and default seeding
"""

from pymatrix.core.compute.random import default_rng, resolve_rng, seed

__all__ = [
    # Random source
    "default_rng",
    "resolve_rng",
    "seed",
]
