from __future__ import annotations

import logging
import os

from .bridge import BridgeParams, JoggerResponse, analyse
from .plotting import plot_response
from .response import sample_displacement
from .utils import ensure_dir, save_response_csv

logger = logging.getLogger(__name__)


def export_response(
    params: BridgeParams,
    results_dir: str,
    steps: int = 100,
    duration: float = 20.0,
) -> JoggerResponse:
    """
    Analyse the span and save the sampled displacement ratio next to the peak.

    Writes `response.csv` (t, y, on_span) and `response.png` into results_dir
    and returns the analysis result.
    """
    result = analyse(params)
    ensure_dir(results_dir)

    t, y = sample_displacement(params.angular_frequency, params.rise_time, steps=steps, duration=duration)

    # -------------------------
    # save artifacts
    # -------------------------
    csv_path = os.path.join(results_dir, "response.csv")
    save_response_csv(csv_path, t, y, result.walk_time)

    png_path = os.path.join(results_dir, "response.png")
    plot_response(
        t=t,
        y=y,
        outpath=png_path,
        title=f"f = {params.frequency:g} Hz, L = {params.length:g} m, zeta = {params.damping:g}",
        peak=(result.peak_time, result.peak_ratio),
        walk_time=result.walk_time,
    )

    logger.info("Response written to %s and %s", csv_path, png_path)
    return result
