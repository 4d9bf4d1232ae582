"""
Ray/shape intersection records
"""
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass(frozen=True, eq=False)
class Intersection:
    t: float
    shape: Any

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t


def intersections(*xs: Intersection) -> List[Intersection]:
    return sorted(xs)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """The visible intersection: lowest non-negative t, or None"""
    best = None
    for i in xs:
        if i.t >= 0 and (best is None or i.t < best.t):
            best = i
    return best
