"""Application layer package.

The application layer orchestrates domain objects through use cases. It
defines the ports the infrastructure layer implements and the DTOs that cross
the layer boundary.
"""

__all__ = []
