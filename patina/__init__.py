"""Triangle-mesh geometry, mesh cutting by intersection, and binary STL output."""

__version__ = "0.1.0"