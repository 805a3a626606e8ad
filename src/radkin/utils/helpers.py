"""
Utility functions for radkin.

This module provides the arithmetic primitives shared by the kinematics
kernels and small helpers used by the configuration layer.
"""
import numpy as np
import logging
from typing import Union

logger = logging.getLogger(__name__)

ScalarOrVector = Union[float, np.ndarray]

def square(value: ScalarOrVector) -> float:
    """
    Square of a scalar or squared Euclidean length of a vector.

    Public primitive for callers; the kernels use :func:`norm`.

    Args:
        value: Scalar or 1D array of components

    Returns:
        Sum of the squared components as a float
    """
    arr = np.asarray(value, dtype=np.float64)
    return float(np.sum(arr * arr))

def norm(value: ScalarOrVector) -> float:
    """
    Euclidean norm of a vector, absolute value of a scalar.

    Args:
        value: Scalar or 1D array of components

    Returns:
        Norm as a float
    """
    return float(np.linalg.norm(np.asarray(value, dtype=np.float64)))

def update_dict_recursively(base_dict: dict, update_with: dict) -> dict:
    """
    Recursively update a dictionary with another dictionary.
    
    Args:
        base_dict: Base dictionary to update
        update_with: Dictionary containing updates
        
    Returns:
        Updated dictionary
    """
    for k, v_update in update_with.items():
        if isinstance(v_update, dict) and k in base_dict and isinstance(base_dict[k], dict):
            update_dict_recursively(base_dict[k], v_update)
        else:
            base_dict[k] = v_update
    return base_dict
