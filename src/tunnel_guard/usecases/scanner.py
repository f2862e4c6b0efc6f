from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from tunnel_guard.domain.messages import IndexedStep
from tunnel_guard.domain.steps import S
from tunnel_guard.services.ordered_window import OrderedWindow


def get_critical_number(steps_in_tunnel: Iterable[S], tunnel_len: int) -> IndexedStep[S] | None:
    """Consume steps until one would collapse the tunnel.

    A step collapses the tunnel when it is not the sum of two distinct
    occurrences among the `tunnel_len` steps before it. Returns None when the
    tunnel is safe, including when there are at most `tunnel_len` steps.

    >>> get_critical_number([5, 4, 7, 9, 14], 3)
    IndexedStep(step=14, index=4)
    >>> get_critical_number([5, 4, 9], 2) is None
    True
    >>> get_critical_number([5, 4, 18], 3) is None
    True
    """
    if tunnel_len < 1:
        raise ValueError(f"tunnel_len must be >= 1, got {tunnel_len}")

    steps = iter(steps_in_tunnel)
    seed = list(islice(steps, tunnel_len))
    if len(seed) < tunnel_len:
        # Nothing left to validate once the seed is short.
        return None

    # Peek one step so an exactly-seeded input never builds a window.
    try:
        step = next(steps)
    except StopIteration:
        return None

    window = OrderedWindow(seed)
    index = tunnel_len
    while True:
        if not window.is_safe(step):
            return IndexedStep(step=step, index=index)
        window.shift_right(step)
        try:
            step = next(steps)
        except StopIteration:
            return None
        index += 1


# Short name for the core entry point.
scan = get_critical_number
