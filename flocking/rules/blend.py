"""
Angular blending used by the steering rules.

The two forms are deliberately not unified: separation steers with the
subtractive form, alignment, cohesion and boundary avoidance with the additive
one. Both switch branch when the raw angle difference reaches pi, without
wrapping either angle first.
"""

import numpy as np


def turn_gain(sensitivity: float, dist):
    """sensitivity / dist^(1/3); unbounded as dist -> 0."""
    return np.float64(sensitivity) / np.cbrt(dist)


def blend_away(heading, target, k):
    diff = target - heading
    if abs(diff) < np.pi:
        return heading - diff * k
    return heading - (heading - target) * k


def blend_toward(heading, target, k):
    diff = target - heading
    if abs(diff) < np.pi:
        return heading + diff * k
    return heading + (heading - target) * k
