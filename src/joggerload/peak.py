from __future__ import annotations

import logging

import numpy as np

from .response import acceleration, velocity

logger = logging.getLogger(__name__)

NEWTON_ITERATIONS = 6


def find_peak_time(a: float, T: float) -> float:
    """
    Time of maximum displacement ratio within one load half-cycle [0, pi / a].

    Newton's method on the velocity, using the acceleration as its slope. A
    fixed number of steps is taken, no tolerance check. Steps past pi / a are
    clamped to it, steps into negative time restart at 0.45 * pi / a.
    """
    t_max = np.pi / a
    t = 0.75 * t_max
    logger.debug("Peak search start: t=%g (t_max=%g)", t, t_max)

    for i in range(NEWTON_ITERATIONS):
        A = acceleration(t, a, T)
        B = velocity(t, a, T) - A * t
        t = -B / A
        if t > t_max:
            t = t_max
        if t < 0:
            t = 0.45 * t_max
        logger.debug("Newton step %d: t=%g, A=%g, B=%g, A*t+B=%g", i + 1, t, A, B, A * t + B)

    return float(t)
