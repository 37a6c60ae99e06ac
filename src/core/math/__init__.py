"""
Core math modules для geodesy-intercept

Численные примитивы и планарная геометрия локальной проекции.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CONVERGENCE_DEG,
    EPS_MACHINE,
    # NaN/Inf checks
    has_nan,
    is_valid_float,
    is_valid_pair,
    # Ranges
    in_range,
    nearest,
    # Division
    ieee_divide,
    # Validation
    validate_min_int,
    validate_positive,
)

# Planar Intersect
from src.core.math.planar_intersect import PlanarIntersector, intersect

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CONVERGENCE_DEG",
    "EPS_MACHINE",
    # Numerical Safeguards: NaN/Inf checks
    "has_nan",
    "is_valid_float",
    "is_valid_pair",
    # Numerical Safeguards: Ranges
    "in_range",
    "nearest",
    # Numerical Safeguards: Division
    "ieee_divide",
    # Numerical Safeguards: Validation
    "validate_min_int",
    "validate_positive",
    # Planar Intersect
    "PlanarIntersector",
    "intersect",
]
