"""Module-lattice KEM building blocks: NTT arithmetic, encodings, hashing and DRBGs."""

__version__ = "0.1.0"

__all__ = [
    "benchmark",
    "ntt",
    "params",
    "poly",
    "polyvec",
    "randombytes",
    "reduce",
    "rng",
    "sha2",
    "symmetric",
    "verify",
]