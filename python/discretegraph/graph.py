import logging
from collections import deque
from itertools import combinations
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Union

from .edge import Edge
from .errors import EdgeNotFound, EdgeNotUnique, VertexNotFound, VertexNotUnique
from .vertex import Vertex

LOGGER = logging.getLogger(__name__)

SOURCE_TYPES = (set, frozenset, list, tuple)

class Graph():
    """
    Simple undirected graph.

    Vertices are stored by label and edges by their unordered pair of labels.
    Every mutation goes through the graph so that the adjacency kept on the
    vertices always mirrors the edge set. Batch mutators check every element
    before changing anything, so a failing batch leaves the graph untouched.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[Any]] = None,
        edges: Optional[Iterable[Any]] = None
    ):
        self._vertices: Dict[Any, Vertex] = {}
        self._edges: Dict[frozenset, Edge] = {}

        if vertices is not None and not isinstance(vertices, SOURCE_TYPES):
            raise TypeError(f"Vertex source must be a set or a sequence, got {type(vertices).__name__}")
        if edges is not None and not isinstance(edges, SOURCE_TYPES):
            raise TypeError(f"Edge source must be a set or a sequence, got {type(edges).__name__}")

        if vertices:
            self.add_vertices([v if isinstance(v, Vertex) else Vertex(v) for v in vertices])

        if edges:
            self.add_edges(self._lift_edges(edges))

    def _lift_edges(self, edges: Iterable[Any]) -> List[Edge]:
        # Label pairs resolve against the vertices already in the graph.
        # Repeated pairs collapse into the first occurrence.
        lifted: Dict[frozenset, Edge] = {}
        for e in edges:
            if not isinstance(e, Edge):
                if not isinstance(e, (list, tuple)) or len(e) not in (2, 3):
                    raise TypeError(f"Cannot build an edge from {e!r}")
                v1, v2 = self.find_vertices_in_order(e[0], e[1])
                e = Edge(v1, v2, *e[2:])
            lifted.setdefault(e.labels, e)
        return list(lifted.values())

    def __str__(self) -> str:
        lines = ""
        for e in self._edges.values():
            lines += f"{e}\n"
        for v in self._vertices.values():
            if v.degree == 0:
                lines += f"{v}\n"
        return lines

    def __repr__(self) -> str:
        return f"Graph(vertices={sorted(map(repr, self._vertices))}, edges={len(self._edges)})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices.values()))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return self.has_vertex(item)
        if isinstance(item, Edge):
            return self.has_edge(item)
        return False

    def __getitem__(self, key: Any) -> Union[Vertex, Edge, None]:
        """
        graph[label] returns the vertex with that label, graph[l1, l2] the
        edge joining the two labels. Returns None when nothing matches.
        """
        if isinstance(key, tuple) and len(key) == 2:
            return self.get_edge(*key)
        return self.get_vertex(key)

    def __lshift__(self, item: Union[Vertex, Edge]) -> 'Graph':
        self.add(item)
        return self

    # Properties of the aggregate

    @property
    def vertex_set(self) -> Set[Vertex]:
        return set(self._vertices.values())

    @property
    def edge_set(self) -> Set[Edge]:
        return set(self._edges.values())

    @property
    def vertex_labels(self) -> Set[Any]:
        return set(self._vertices.keys())

    @property
    def edge_labels(self) -> Set[frozenset]:
        return set(self._edges.keys())

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def degrees(self) -> Dict[Any, int]:
        """Number of adjacent vertices for each vertex label."""
        return {label: v.degree for label, v in self._vertices.items()}

    def has_vertex(self, v: Vertex) -> bool:
        return v.label in self._vertices

    def has_edge(self, e: Edge) -> bool:
        return e.labels in self._edges

    # Insertion

    def add(self, item: Union[Vertex, Edge]):
        """Add a vertex or an edge, depending on what is given."""
        if isinstance(item, Vertex):
            self.add_vertex(item)
        elif isinstance(item, Edge):
            self.add_edge(item)
        else:
            raise TypeError(f"Expected a Vertex or an Edge, got {type(item).__name__}")

    def add_vertex(self, v: Vertex):
        self.add_vertices([v])

    def add_vertices(self, vertices: Iterable[Vertex]):
        """Add every vertex, or none of them if one is invalid."""
        pending: Dict[Any, Vertex] = {}
        for v in vertices:
            if not isinstance(v, Vertex):
                raise TypeError(f"Expected a Vertex, got {type(v).__name__}")
            if v.label in self._vertices or v.label in pending:
                raise VertexNotUnique(f"Vertex with label {v.label!r} already exists")
            pending[v.label] = v

        for label in pending:
            # The graph keeps its own copy, the given vertex may belong elsewhere.
            self._vertices[label] = Vertex(label)
            LOGGER.debug("Added vertex %r", label)

    def add_edge(self, e: Edge):
        self.add_edges([e])

    def add_edges(self, edges: Iterable[Edge]):
        """Add every edge, or none of them if one is invalid."""
        pending: Dict[frozenset, Edge] = {}
        for e in edges:
            if not isinstance(e, Edge):
                raise TypeError(f"Expected an Edge, got {type(e).__name__}")
            for v in e.vertices:
                if v.label not in self._vertices:
                    raise VertexNotFound(f"Vertex {v.label!r} of edge {e} not in graph")
            if e.labels in self._edges or e.labels in pending:
                raise EdgeNotUnique(f"Edge between {e.v1.label!r} and {e.v2.label!r} already exists")
            pending[e.labels] = e

        for key, e in pending.items():
            v1, v2 = self._vertices[e.v1.label], self._vertices[e.v2.label]
            # Store the edge over the graph's own vertex objects.
            if v1 is not e.v1 or v2 is not e.v2:
                e = Edge(v1, v2, e.weight)
            self._edges[key] = e
            v1._add_adjacent(v2)
            v2._add_adjacent(v1)
            LOGGER.debug("Added edge %s", e)

    add_node = add_vertex
    add_nodes = add_vertices

    # Removal

    def remove_vertex(self, v: Vertex):
        self.remove_vertices([v])

    def remove_vertices(self, vertices: Iterable[Vertex]):
        """Remove the vertices together with every edge incident to them."""
        labels = []
        for v in vertices:
            if not isinstance(v, Vertex):
                raise TypeError(f"Expected a Vertex, got {type(v).__name__}")
            if v.label not in self._vertices:
                raise VertexNotFound(f"Vertex {v.label!r} not in graph")
            if v.label not in labels:
                labels.append(v.label)

        for label in labels:
            vertex = self._vertices.pop(label)
            for other_label in list(vertex.adjacent_labels):
                other = self._vertices[other_label]
                del self._edges[frozenset((label, other_label))]
                other._remove_adjacent(vertex)
                LOGGER.debug("Removed edge between %r and %r with vertex %r", label, other_label, label)
            vertex._clear_adjacent()
            LOGGER.debug("Removed vertex %r", label)

    def remove_edge(self, e: Edge):
        self.remove_edges([e])

    def remove_edges(self, edges: Iterable[Edge]):
        keys = []
        for e in edges:
            if not isinstance(e, Edge):
                raise TypeError(f"Expected an Edge, got {type(e).__name__}")
            if e.labels not in self._edges:
                raise EdgeNotFound(f"Edge between {e.v1.label!r} and {e.v2.label!r} does not exist")
            if e.labels not in keys:
                keys.append(e.labels)

        for key in keys:
            stored = self._edges.pop(key)
            stored.v1._remove_adjacent(stored.v2)
            stored.v2._remove_adjacent(stored.v1)
            LOGGER.debug("Removed edge %s", stored)

    remove_node = remove_vertex
    remove_nodes = remove_vertices

    # Lookup

    def get_vertex(self, label: Any) -> Optional[Vertex]:
        try:
            return self._vertices.get(label)
        except TypeError:
            # Unhashable, so never a stored label
            return None

    def get_edge(self, label1: Any, label2: Any) -> Optional[Edge]:
        try:
            return self._edges.get(frozenset((label1, label2)))
        except TypeError:
            return None

    def find_vertex_by_label(self, label: Any) -> Vertex:
        try:
            return self._vertices[label]
        except KeyError:
            raise VertexNotFound(f"No vertex with label {label!r}") from None

    def find_vertices_by_labels(self, *labels) -> Set[Vertex]:
        return set(self.find_vertices_in_order(*labels))

    def find_vertices_in_order(self, *labels) -> List[Vertex]:
        missing = [label for label in labels if label not in self._vertices]
        if missing:
            raise VertexNotFound(f"No vertices with labels {missing!r}")
        return [self._vertices[label] for label in labels]

    def find_edge_by_labels(self, label1: Any, label2: Any) -> Edge:
        e = self.get_edge(label1, label2)
        if e is None:
            raise EdgeNotFound(f"No edge between {label1!r} and {label2!r}")
        return e

    def adjacent_vertices(self, v: Vertex) -> Set[Vertex]:
        if not isinstance(v, Vertex):
            raise TypeError(f"Expected a Vertex, got {type(v).__name__}")
        vertex = self.find_vertex_by_label(v.label)
        return {self._vertices[label] for label in vertex.adjacent_labels}

    # Graph properties

    def is_complete(self) -> bool:
        """Check that every vertex is adjacent to every other vertex."""
        n = len(self._vertices)
        if len(self._edges) != n * (n - 1) // 2:
            return False
        # The count alone is only necessary, confirm pair by pair.
        for u, v in combinations(self._vertices.values(), 2):
            if not u.is_adjacent_to(v):
                return False
        return True

    def is_regular(self) -> bool:
        """Check that all vertices have the same degree."""
        return len({v.degree for v in self._vertices.values()}) <= 1

    def is_weighted(self) -> bool:
        """Check whether some edge has a different weight than another one."""
        weights = [e.weight for e in self._edges.values()]
        return any(w != weights[0] for w in weights[1:])

    def is_bipartite(self) -> bool:
        """
        Check whether the vertices can be 2-coloured so that no edge joins two
        vertices of the same colour.

        A bipartite graph on n vertices has at most floor(n^2 / 4) edges, so
        denser graphs are rejected without searching.
        """
        n = len(self._vertices)
        if len(self._edges) > n * n // 4:
            LOGGER.debug("Not bipartite: %d edges on %d vertices", len(self._edges), n)
            return False

        colours: Dict[Any, int] = {}
        for label in self._vertices:
            if label not in colours:
                if not self._two_colour_component(label, colours):
                    return False
        return True

    def _two_colour_component(self, start: Any, colours: Dict[Any, int]) -> bool:
        """Breadth first 2-colouring of the component containing start."""
        colours[start] = 0
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbour in self._vertices[current].adjacent_labels:
                if neighbour not in colours:
                    colours[neighbour] = 1 - colours[current]
                    queue.append(neighbour)
                elif colours[neighbour] == colours[current]:
                    LOGGER.debug("Not bipartite: %r and %r share a colour", current, neighbour)
                    return False
        return True
