"""Protocol-based interfaces for Musterroll.

This module exports the catalog lookup protocol, providing a clear contract
between the domain layer and whatever backs the reference data.
"""

from musterroll.interfaces.reference import IReferenceIndex

__all__ = [
    "IReferenceIndex",
]
