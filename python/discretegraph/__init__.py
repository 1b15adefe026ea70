from .constants import Constants
from .errors import (
    GraphError,
    DuplicateLabel,
    SelfLoop,
    VertexNotUnique,
    EdgeNotUnique,
    VertexNotFound,
    EdgeNotFound,
)
from .vertex import Vertex
from .edge import Edge
from .graph import Graph
