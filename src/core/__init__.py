"""
Core domain models, numerical primitives, and payload contracts.

This module contains the foundational building blocks that are independent
of the geodesic engine (coordinates, planar geometry, JSON contracts).
"""
