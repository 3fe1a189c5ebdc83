from __future__ import annotations

from typing import Tuple

import numpy as np


def displacement(t, a, T):
    """
    Displacement ratio (fraction of steady-state amplitude) of a damped SDOF
    oscillator under a harmonic load whose amplitude rises as 1 - exp(-t/T).

    a: angular frequency of the modeshape at the load position (pi * v / L)
    T: rise time constant, 1 / (2 * pi * f * zeta)
    """
    return (-a * T * np.cos(a * t) + a * T * np.exp(-t / T) + np.sin(a * t)) / ((a * T) ** 2 + 1)


def velocity(t, a, T):
    """First time derivative of the displacement ratio."""
    return (a**2 * T * np.sin(a * t) + a * np.cos(a * t) - a * np.exp(-t / T)) / ((a * T) ** 2 + 1)


def acceleration(t, a, T):
    """Second time derivative of the displacement ratio."""
    return (a**3 * T * np.cos(a * t) - a**2 * np.sin(a * t) + a * np.exp(-t / T) / T) / ((a * T) ** 2 + 1)


def jogger_load_factor(f: float) -> float:
    """
    Sensitivity of a resonance frequency f [Hz] to jogger step excitation.

    Zero outside (1.9, 3.5) Hz, one on the 2.2-2.7 Hz plateau. The ramps are
    (f - 1.9) * 0.3 and (3.5 - f) * 0.8, so the curve jumps at 2.2 and 2.7 Hz.
    """
    if f <= 1.9 or f >= 3.5:
        return 0.0
    elif f < 2.2:
        return (f - 1.9) * (2.2 - 1.9)
    elif f <= 2.7:
        return 1.0
    else:
        return -(f - 3.5) * (3.5 - 2.7)


def sample_displacement(a: float, T: float, steps: int = 100, duration: float = 20.0) -> Tuple[np.ndarray, np.ndarray]:
    """Displacement ratio on `steps` equally spaced times in [0, duration)."""
    t = np.arange(steps) * duration / steps
    return t, displacement(t, a, T)
