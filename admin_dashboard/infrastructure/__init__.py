"""Infrastructure layer package.

Adapters implementing the application ports (persistence) and the
configuration that wires them together.
"""
