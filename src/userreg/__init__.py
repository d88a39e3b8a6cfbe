"""userreg

A small in-memory user registry. Users are immutable value records; the
registry supports registration, keyed lookup, a plaintext login check and
deletion delegated to an injected data-access collaborator.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
