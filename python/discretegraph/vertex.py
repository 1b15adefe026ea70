from dataclasses import dataclass, field
from typing import Any, Set

from .errors import DuplicateLabel

@dataclass(frozen=True, eq=False)
class Vertex:
    """
    Labeled vertex. Adjacency is kept as the labels of the adjacent vertices,
    so vertices never hold references to each other. Only a Graph should
    change it, in lockstep with its edge set.
    """
    label: Any
    _adjacent: Set[Any] = field(default_factory=set, init=False, repr=False)

    def __str__(self) -> str:
        return f"{self.label}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            raise TypeError(f"Cannot compare Vertex with {type(other).__name__}")
        return self.label == other.label

    def __hash__(self) -> int:
        return hash((Vertex, self.label))

    @classmethod
    def build_many(cls, *labels) -> Set['Vertex']:
        """Build one vertex per label. The labels must be distinct."""
        vertices = set()
        seen = set()
        for label in labels:
            if label in seen:
                raise DuplicateLabel(f"Label {label!r} given more than once")
            seen.add(label)
            vertices.add(cls(label))
        return vertices

    @property
    def adjacent_labels(self) -> frozenset:
        return frozenset(self._adjacent)

    @property
    def degree(self) -> int:
        return len(self._adjacent)

    def is_adjacent_to(self, other: 'Vertex') -> bool:
        if not isinstance(other, Vertex):
            raise TypeError(f"Expected a Vertex, got {type(other).__name__}")
        return other.label in self._adjacent

    def _add_adjacent(self, other: 'Vertex'):
        if other.label != self.label:
            self._adjacent.add(other.label)

    def _remove_adjacent(self, other: 'Vertex'):
        self._adjacent.discard(other.label)

    def _clear_adjacent(self):
        self._adjacent.clear()
