"""OpenPGP building blocks: wire helpers, MPIs, packet headers, key IDs, S2K and encrypted secret parameters."""

__version__ = "0.1.0"

__all__ = ["encrypted_secret", "identifiers", "mpi", "packet", "s2k", "util"]