"""Vector math, easing curves and loop timing helpers."""

from stacking_arm.utils.vector import UP_AXIS, as_vec3, distance, normalize
from stacking_arm.utils.easing import ease_in_out, arc_offset, lerp

__all__ = [
    "UP_AXIS",
    "as_vec3",
    "distance",
    "normalize",
    "ease_in_out",
    "arc_offset",
    "lerp",
]
