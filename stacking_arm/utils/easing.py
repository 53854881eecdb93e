"""Easing curves used to shape the driver's travel between targets."""

import numpy as np


def ease_in_out(t: float) -> float:
    """
    Cosine ease-in/ease-out.

    Maps 0 -> 0, 0.5 -> 0.5 and 1 -> 1 with zero slope at both ends. Values
    outside [0, 1] are not clamped.
    """
    return 0.5 * (1.0 - np.cos(t * np.pi))


def arc_offset(t: float, height: float = 0.5) -> float:
    """Parabolic lift, 0 at t = 0 and t = 1, ``height`` at t = 0.5."""
    return height * (1.0 - (2.0 * t - 1.0) ** 2)


def lerp(start: np.ndarray, end: np.ndarray, t: float) -> np.ndarray:
    return start + (end - start) * t
