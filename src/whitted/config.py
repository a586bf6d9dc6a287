"""Shared numerical constants and runtime configuration.

The tolerances here are used throughout the package:

    EPSILON: Approximate equality for tuples, colors and matrices, the
        parallel-ray test for planes, and the over-point offset used when
        casting shadow rays.
    DETERMINANT_EPSILON: Threshold below which a matrix is treated as
        singular. It is much tighter than EPSILON so that small but valid
        scalings (e.g. scaling(0.01, 0.01, 0.01)) stay invertible.

The Taichi runtime is initialized lazily through init_taichi(). Only the
CPU arch is used, with float64 as the default floating-point type so that
the parallel backend agrees with the Python reference loop.
"""

from __future__ import annotations

import logging
from typing import Literal

import taichi as ti

logger = logging.getLogger(__name__)

# Tolerance for approximate float comparisons and the shadow over-point
EPSILON = 1e-5

# |det| below this value means the matrix has no inverse
DETERMINANT_EPSILON = 1e-10

# Render backends accepted by Camera.render()
Backend = Literal["python", "taichi"]
DEFAULT_BACKEND: Backend = "python"

_taichi_initialized = False


def init_taichi(max_threads: int | None = None) -> None:
    """Initialize the Taichi runtime on the CPU with float64 arithmetic.

    Calling this more than once is a no-op: re-initializing Taichi would
    destroy fields that existing integrators still reference.

    Args:
        max_threads: Optional cap on the number of CPU worker threads used
            by parallel kernels. None lets Taichi pick.
    """
    global _taichi_initialized
    if max_threads is not None and max_threads <= 0:
        raise ValueError(f"max_threads must be positive, got {max_threads}")
    if _taichi_initialized:
        return

    kwargs = {"arch": ti.cpu, "default_fp": ti.f64, "default_ip": ti.i32}
    if max_threads is not None:
        kwargs["cpu_max_num_threads"] = max_threads

    ti.init(**kwargs)
    _taichi_initialized = True
    logger.debug("Taichi initialized on CPU (max_threads=%s)", max_threads)


def is_taichi_initialized() -> bool:
    """Return True once init_taichi() has run in this process."""
    return _taichi_initialized
