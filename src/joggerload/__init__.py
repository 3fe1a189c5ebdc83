"""Peak acceleration of single-span bridges under passing jogger groups."""
from .bridge import JOGGER_FORCE, BridgeParams, JoggerResponse, analyse, peak_acceleration
from .peak import find_peak_time
from .response import acceleration, displacement, jogger_load_factor, sample_displacement, velocity

__all__ = [
    "JOGGER_FORCE",
    "BridgeParams",
    "JoggerResponse",
    "acceleration",
    "analyse",
    "displacement",
    "find_peak_time",
    "jogger_load_factor",
    "peak_acceleration",
    "sample_displacement",
    "velocity",
]
