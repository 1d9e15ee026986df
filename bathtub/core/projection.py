from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Segment:
    """One painted slab of water, addressed by its index from the tub floor."""

    index: int

    @property
    def name(self) -> str:
        return f"level-{self.index}"


def project(current: int) -> List[Segment]:
    return [Segment(index=i) for i in range(max(0, int(current)))]
