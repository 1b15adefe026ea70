from dataclasses import dataclass, field
from typing import Any, Iterable, Set, Tuple

from .constants import Constants
from .errors import SelfLoop
from .vertex import Vertex

@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected edge between two distinct vertices. Two edges are equal when
    they join the same pair of labels, whatever the order and the weight.
    """
    v1: Vertex
    v2: Vertex
    weight: Any = field(default=Constants.DEFAULT_WEIGHT)

    def __post_init__(self):
        if not isinstance(self.v1, Vertex) or not isinstance(self.v2, Vertex):
            raise TypeError("Edge endpoints must be Vertex instances")
        if self.v1 == self.v2:
            raise SelfLoop(f"Edge cannot connect vertex {self.v1.label!r} to itself")

    def __str__(self) -> str:
        if self.weight != Constants.DEFAULT_WEIGHT:
            return f"{self.v1} --[{self.weight}]-- {self.v2}"
        else:
            return f"{self.v1} ------- {self.v2}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return False
        return self.labels == other.labels

    def __hash__(self) -> int:
        return hash((Edge, self.labels))

    @classmethod
    def build_many(cls, *pairs: Iterable[Tuple]) -> Set['Edge']:
        """
        Build edges from (v1, v2) or (v1, v2, weight) tuples.
        Pairs joining the same vertices collapse into one edge.
        """
        edges = set()
        for pair in pairs:
            edges.add(cls(*pair))
        return edges

    @property
    def labels(self) -> frozenset:
        return frozenset((self.v1.label, self.v2.label))

    @property
    def vertices(self) -> Tuple[Vertex, Vertex]:
        return (self.v1, self.v2)

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite to the given one."""
        if vertex == self.v1:
            return self.v2
        if vertex == self.v2:
            return self.v1
        raise ValueError(f"Vertex {vertex.label!r} is not an endpoint of {self}")
