"""Allocate float32 vectors and apply linear rescaling transforms."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

VECTOR_DTYPE = np.float32


def create_float_vector(length: int) -> np.ndarray:
    """Allocate an uninitialized float32 vector owned by the caller.

    Args:
        length (int): Number of slots; must be non-negative.

    Returns:
        numpy.ndarray: 1-D array of ``length`` uninitialized float32 values.

    Raises:
        TypeError: If ``length`` is not an integer.
        ValueError: If ``length`` is negative.
        MemoryError: If the buffer cannot be allocated.
    """
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise TypeError(f"length must be an integer, got {type(length)}")
    if length < 0:
        raise ValueError(f"length cannot be negative, got {length}")
    try:
        return np.empty(int(length), dtype=VECTOR_DTYPE)
    except MemoryError as exc:
        raise MemoryError(f"Unable to allocate float vector of length {length}") from exc


def _as_vector(vector, length: int | None = None) -> np.ndarray:
    arr = np.asarray(vector, dtype=VECTOR_DTYPE)
    if arr.ndim != 1:
        raise ValueError(f"vector must be 1-D, got {arr.ndim} dimension(s)")
    if length is None:
        return arr
    if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
        raise TypeError(f"length must be an integer, got {type(length)}")
    if not 0 <= length <= len(arr):
        raise ValueError(f"length {length} out of range [0, {len(arr)}]")
    return arr[:length]


def _bounds_span(lower_bound: float, upper_bound: float) -> np.float32:
    # Bounds are compared after the cast; distinct doubles may collapse in float32.
    span = np.float32(upper_bound) - np.float32(lower_bound)
    if span == 0:
        raise ValueError(
            f"upper_bound and lower_bound must differ in float32, got {lower_bound} and {upper_bound}"
        )
    return span


def scale_to_unity(
    vector, lower_bound: float, upper_bound: float, *, length: int | None = None
) -> np.ndarray:
    """Divide every element by the width of ``[lower_bound, upper_bound]``.

    The lower bound is not subtracted first, so the result lies in ``[0, 1]``
    only when the inputs already lie in the given range and ``lower_bound`` is
    close to zero. Use :func:`scale_vector` with ``(0, 1)`` as target for a
    true min-max transform.

    Args:
        vector: 1-D sequence of values; not modified.
        lower_bound (float): Lower end of the source range.
        upper_bound (float): Upper end of the source range.
        length (int, optional): Scale only the first ``length`` elements.

    Returns:
        numpy.ndarray: New float32 vector ``vector / (upper_bound - lower_bound)``.

    Raises:
        ValueError: If the bounds are equal.
    """
    src = _as_vector(vector, length)
    span = _bounds_span(lower_bound, upper_bound)

    unity = create_float_vector(len(src))
    np.divide(src, span, out=unity)
    return unity


def scale_vector(
    vector,
    lower_bound: float,
    upper_bound: float,
    new_low_bound: float,
    new_up_bound: float,
    *,
    length: int | None = None,
) -> np.ndarray:
    """Affinely map values from one interval onto another.

    ``scale = (new_up - new_low) / (upper - lower)`` and
    ``offset = new_low - scale * lower``; each output is ``x * scale + offset``.

    Raises:
        ValueError: If ``upper_bound == lower_bound``.
    """
    src = _as_vector(vector, length)
    span = _bounds_span(lower_bound, upper_bound)

    scale = (np.float32(new_up_bound) - np.float32(new_low_bound)) / span
    offset = np.float32(new_low_bound) - scale * np.float32(lower_bound)
    logger.debug(
        "Rescaling %d values from [%g, %g] to [%g, %g]",
        len(src),
        lower_bound,
        upper_bound,
        new_low_bound,
        new_up_bound,
    )

    scaled = create_float_vector(len(src))
    np.multiply(src, scale, out=scaled)
    scaled += offset
    return scaled
