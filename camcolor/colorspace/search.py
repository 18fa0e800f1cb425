"""Tolerance-bounded bisection shared by the gamut mapping searches."""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Probe(Generic[T]):
    """Outcome of evaluating one midpoint.

    Attributes:
        candidate: Accepted result at this midpoint, or None
        go_higher: Continue in the upper half of the bracket
        done: Stop immediately (exact match)
    """
    candidate: Optional[T]
    go_higher: bool
    done: bool = False


def bisect(
    low: float,
    high: float,
    probe: Callable[[float], Probe[T]],
    tolerance: float,
    inclusive: bool = False,
) -> Optional[T]:
    """Bisect [low, high] until the bracket is narrower than `tolerance`.

    Every accepted candidate replaces the previous one, so the result is the
    one found closest to convergence.

    Args:
        low, high: Initial bracket
        probe: Evaluates a midpoint and says which half to keep
        tolerance: Bracket width at which the search stops
        inclusive: Stop once width <= tolerance instead of width < tolerance

    Returns:
        The last accepted candidate, or None if none was accepted
    """
    best = None
    while True:
        width = abs(high - low)
        converged = (width <= tolerance) if inclusive else (width < tolerance)
        if converged:
            break
        mid = low + (high - low) / 2.0
        result = probe(mid)
        if result.candidate is not None:
            best = result.candidate
        if result.done:
            break
        if result.go_higher:
            low = mid
        else:
            high = mid
    return best
