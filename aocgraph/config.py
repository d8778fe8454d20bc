"""Configuration classes for aocgraph algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from aocgraph.graph.graph import Label


@dataclass(frozen=True)
class PathfinderConfig:
    """Options for the Hamiltonian path search.

    Attributes:
        starting_vertices: Labels to try as path origins. None means every
            vertex. Origins are always tried in graph insertion order.
        sum_path: If True, a result's cost is the sum of its edge weights;
            otherwise it is the number of edges in the path.
        detect_cycles: If True, only paths that close back onto their origin
            are reported (Hamiltonian cycles).
        max_results: Stop the search once this many results were reported.
            None means no limit.
    """

    starting_vertices: Optional[Tuple[Label, ...]] = None
    sum_path: bool = False
    detect_cycles: bool = False
    max_results: Optional[int] = None

    def __post_init__(self) -> None:
        if self.starting_vertices is not None:
            if isinstance(self.starting_vertices, (str, bytes)):
                raise ValueError(
                    "starting_vertices must be a collection of labels, "
                    f"not a single string: {self.starting_vertices!r}"
                )
            # Frozen dataclass: normalize through object.__setattr__
            object.__setattr__(
                self, "starting_vertices", _dedupe(self.starting_vertices)
            )
        if not isinstance(self.sum_path, bool):
            raise ValueError(f"sum_path must be a bool, got {self.sum_path!r}")
        if not isinstance(self.detect_cycles, bool):
            raise ValueError(
                f"detect_cycles must be a bool, got {self.detect_cycles!r}"
            )
        if self.max_results is not None and (
            isinstance(self.max_results, bool)
            or not isinstance(self.max_results, int)
            or self.max_results < 1
        ):
            raise ValueError(
                f"max_results must be a positive integer or None, got {self.max_results!r}"
            )


def _dedupe(labels: Iterable[Label]) -> Tuple[Label, ...]:
    return tuple(dict.fromkeys(labels))


# Default configuration instance
DEFAULT_PATHFINDER_CONFIG = PathfinderConfig()
