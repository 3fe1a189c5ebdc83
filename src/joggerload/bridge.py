from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .peak import find_peak_time
from .response import displacement, jogger_load_factor

logger = logging.getLogger(__name__)

JOGGER_FORCE = 1250.0  # N, amplitude of one jogger at full resonance
DEFAULT_VELOCITY = 3.0  # m/s


def check_positive(name: str, value: float) -> float:
    """Return value, or raise ValueError unless it is a finite number > 0."""
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive number, got {value!r}.")
    return value


@dataclass(frozen=True)
class BridgeParams:
    """Single span with free rotational supports, crossed by a jogger group."""

    frequency: float  # Hz
    length: float  # m
    damping: float  # -
    velocity: float = DEFAULT_VELOCITY  # m/s
    mass: Optional[float] = None  # kg, generalized

    @property
    def angular_frequency(self) -> float:
        return np.pi * self.velocity / self.length

    @property
    def rise_time(self) -> float:
        return 1 / (2 * np.pi * self.frequency * self.damping)

    @property
    def walk_time(self) -> float:
        return self.length / self.velocity

    def validate(self) -> None:
        fields = [
            ("frequency", self.frequency),
            ("length", self.length),
            ("damping", self.damping),
            ("velocity", self.velocity),
        ]
        if self.mass is not None:
            fields.append(("mass", self.mass))

        for name, value in fields:
            check_positive(name, value)


@dataclass(frozen=True)
class JoggerResponse:
    load_factor: float
    jogger_load: float  # N per jogger
    peak_time: float  # s
    walk_time: float  # s
    peak_time_percent: float
    peak_ratio: float  # fraction of steady-state amplitude
    peak_acceleration: Optional[float] = None  # m/s^2 per jogger


def peak_acceleration(ratio: float, load_factor: float, mass: float, damping: float) -> float:
    """Peak acceleration per jogger: steady-state amplitude F / (2 m zeta) scaled by the reached ratio."""
    return ratio * JOGGER_FORCE * load_factor / (2 * mass * damping)


def analyse(params: BridgeParams) -> JoggerResponse:
    """
    Peak response of the span for one passing jogger group.

    Raises ValueError for non-positive or non-finite parameters.
    """
    params.validate()

    a = params.angular_frequency
    T = params.rise_time
    load_factor = jogger_load_factor(params.frequency)

    t_peak = find_peak_time(a, T)
    ratio = float(displacement(t_peak, a, T))
    logger.info("a=%g rad/s, T=%g s, t_peak=%g s, ratio=%g", a, T, t_peak, ratio)

    acc = None
    if params.mass is not None:
        acc = peak_acceleration(ratio, load_factor, params.mass, params.damping)

    return JoggerResponse(
        load_factor=load_factor,
        jogger_load=load_factor * JOGGER_FORCE,
        peak_time=t_peak,
        walk_time=params.walk_time,
        peak_time_percent=t_peak * 100 / params.walk_time,
        peak_ratio=ratio,
        peak_acceleration=acc,
    )
