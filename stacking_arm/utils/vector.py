"""3D vector helpers on top of numpy arrays.

Vectors are plain ``np.ndarray`` of shape ``(3,)``. They are treated as
immutable: helpers return new arrays and never write to their arguments.
"""

import numpy as np

from stacking_arm.errors import DegenerateDirection

# Scene convention is Y-up
UP_AXIS = 1
EPSILON = 1e-9


def as_vec3(value) -> np.ndarray:
    """Convert a 3-sequence to a new float64 vector."""
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"Expected a 3D vector, got shape {vec.shape}")
    return vec


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.linalg.norm(np.asarray(a) - np.asarray(b)))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Return the unit vector pointing along ``v``.

    Raises:
        DegenerateDirection: if ``v`` is (numerically) the zero vector.
    """
    norm = np.linalg.norm(v)
    if norm < EPSILON:
        raise DegenerateDirection(f"Cannot normalize zero-length vector {v}")
    return v / norm
