"""
Interactive jogger-load calculator.

Reads the span properties one number at a time from stdin and prints the
peak acceleration per jogger. Flags:

    -p   also print t, y pairs of the displacement ratio for 0-20 s
    -v   ask for the jogger velocity instead of assuming 3 m/s

Any other argument is ignored, including -h and grouped flags such as -pv.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import List, Optional, TextIO

from .bridge import (
    DEFAULT_VELOCITY,
    JOGGER_FORCE,
    BridgeParams,
    JoggerResponse,
    analyse,
    check_positive,
    peak_acceleration,
)
from .logging_config import setup_logging
from .response import jogger_load_factor, sample_displacement

logger = logging.getLogger(__name__)

LABEL_WIDTH = 33
DUMP_STEPS = 100
DUMP_DURATION = 20.0  # s
FLAGS = ("-p", "-v")


@dataclass(frozen=True)
class RunOptions:
    plot: bool = False
    override_velocity: bool = False


class _TokenReader:
    """Whitespace separated numbers from a text stream, across lines."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: List[str] = []

    def next_float(self) -> float:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._tokens = line.split()
        return float(self._tokens.pop(0))


def _line(label: str) -> str:
    return f"{label:<{LABEL_WIDTH}}= "


def run(options: RunOptions, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> JoggerResponse:
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    reader = _TokenReader(stdin)

    def ask(label: str, name: str) -> float:
        out.write(_line(label))
        out.flush()
        return check_positive(name, reader.next_float())

    # -------------------------
    # span properties
    # -------------------------
    f = ask("Resonance frequency at span [Hz]", "frequency")
    out.write("\n")
    out.write(_line("Jogger load [N]") + f"{jogger_load_factor(f) * JOGGER_FORCE:g}  per jogger.\n\n")

    L = ask("Length of span [m]", "length")
    if options.override_velocity:
        v = ask("Velocity joggers", "velocity")
    else:
        v = DEFAULT_VELOCITY
        out.write(_line("Assumed velocity jogger [m/s]") + f"{v:g}\n")
    z = ask("Damping of bridge [-]", "damping")
    out.write("\n")

    params = BridgeParams(frequency=f, length=L, damping=z, velocity=v)

    # -------------------------
    # response
    # -------------------------
    if options.plot:
        t_grid, y_grid = sample_displacement(
            params.angular_frequency, params.rise_time, steps=DUMP_STEPS, duration=DUMP_DURATION
        )
        for t_i, y_i in zip(t_grid.tolist(), y_grid.tolist()):
            out.write(f"{t_i:g}, {y_i:g}\n")

    result = analyse(params)
    out.write(
        _line("t_max")
        + f"{result.peak_time:g} of {result.walk_time:g} [s] at {result.peak_time_percent:g} %\n"
    )
    out.write(_line("y_max") + f"{result.peak_ratio * 100:g} % of maximum.\n\n")

    m = ask("Generalized mass [kg]", "mass")
    acc = peak_acceleration(result.peak_ratio, result.load_factor, m, z)
    out.write(_line("Maximal acceleration [m/s^2]") + f"{acc:g} per jogger.\n")
    out.flush()

    logger.info("Peak acceleration %g m/s^2 per jogger (mass %g kg)", acc, m)
    return replace(result, peak_acceleration=acc)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joggerload",
        description="Peak acceleration of a single-span bridge under a passing jogger group.",
        add_help=False,
    )
    parser.add_argument("-p", dest="plot", action="store_true", help="Print t, y pairs of the response for plotting.")
    parser.add_argument("-v", dest="override_velocity", action="store_true", help="Ask for the jogger velocity.")
    return parser


def parse_options(argv: List[str]) -> RunOptions:
    """Only the exact tokens -p and -v count; grouped or unknown arguments are dropped."""
    args = build_parser().parse_args([arg for arg in argv if arg in FLAGS])
    return RunOptions(plot=args.plot, override_velocity=args.override_velocity)


def _log_level() -> int:
    level = logging.getLevelName(os.environ.get("JOGGERLOAD_LOG_LEVEL", "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def main(argv: Optional[List[str]] = None) -> None:
    options = parse_options(sys.argv[1:] if argv is None else argv)

    setup_logging(level=_log_level())

    try:
        run(options)
    except (ValueError, EOFError) as e:
        sys.stdout.write("\n")
        logger.error("Run aborted: %s", e)
        logger.debug("Traceback", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
