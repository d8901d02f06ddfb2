import numpy as np

from ..exceptions import PreconditionViolation


def split_and_distribute_remainder(total_amount: int, num_intervals: int) -> np.ndarray:
    """
    Split an amount across intervals.

    Uses the remainder distribution algorithm:
    - Base amount per interval = floor(total_amount / num_intervals)
    - Remainder = total_amount mod num_intervals
    - Distribute remainder by adding 1 to the last ``remainder`` intervals

    Args:
        total_amount: Total amount to distribute
        num_intervals: Number of intervals to distribute across

    Returns:
        Array of amounts per interval
    """
    base = total_amount // num_intervals
    remainder = total_amount % num_intervals

    distribution = np.full(num_intervals, base, dtype=int)

    if remainder:
        idx = np.arange(num_intervals - remainder, num_intervals)
        distribution[idx] += 1

    return distribution


def allocate_gaps(point_count: int, total_steps: int) -> np.ndarray:
    """
    Number of generated colors between each pair of adjacent stops.

    Every gap receives ``floor((total_steps - point_count) / (point_count - 1))``
    colors; the rest go one each to the rightmost gaps. The stops themselves
    account for ``point_count`` of the ``total_steps``.

    Raises:
        PreconditionViolation: If fewer than two points are given or
            ``total_steps < point_count``.
    """
    if point_count < 2:
        raise PreconditionViolation(f"At least two colors are required, got {point_count}")
    if total_steps < point_count:
        raise PreconditionViolation(
            f"total_steps ({total_steps}) must be at least the number of colors ({point_count})"
        )
    return split_and_distribute_remainder(total_steps - point_count, point_count - 1)
