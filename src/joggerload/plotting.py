from __future__ import annotations

import os
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .utils import ensure_dir


def plot_response(
    t: np.ndarray,
    y: np.ndarray,
    outpath: str,
    title: str,
    peak: Optional[Tuple[float, float]] = None,
    walk_time: Optional[float] = None,
) -> None:
    """Save the displacement-ratio history, optionally marking the (t, y) peak and the end of the crossing."""
    ensure_dir(os.path.dirname(outpath))
    plt.figure(figsize=(7, 3))
    plt.plot(t, y, label="Displacement ratio")
    if peak is not None:
        plt.scatter([peak[0]], [peak[1]], s=24, color="red", zorder=3, label="Peak in crossing")
    plt.axhline(1.0, color="grey", linestyle="--", linewidth=0.8)
    if walk_time is not None:
        plt.axvline(walk_time, color="grey", linestyle=":", linewidth=0.8, label="Group leaves span")
    plt.title(title)
    plt.xlabel("t [s]")
    plt.ylabel("y / y_steady [-]")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outpath, dpi=200)
    plt.close()
