from __future__ import annotations

import csv
import os

import numpy as np


def ensure_dir(path: str) -> None:
    if path:
        os.makedirs(path, exist_ok=True)


def save_response_csv(path: str, t: np.ndarray, y: np.ndarray, walk_time: float) -> None:
    """Write t, y and whether the jogger group is still on the span (1/0)."""
    ensure_dir(os.path.dirname(path))
    on_span = (t <= walk_time).astype(int)
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["t", "y", "on_span"])
        writer.writerows(zip(t.tolist(), y.tolist(), on_span.tolist()))
