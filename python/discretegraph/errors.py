class GraphError(Exception):
    """Base class for every error raised by the graph structures."""
    pass

class DuplicateLabel(GraphError, ValueError):
    """Exception raised when a batch of labels contains the same label twice."""
    pass

class SelfLoop(GraphError, ValueError):
    """Exception raised when an edge would connect a vertex to itself."""
    pass

class VertexNotUnique(GraphError, ValueError):
    pass

class EdgeNotUnique(GraphError, ValueError):
    pass

class VertexNotFound(GraphError, LookupError):
    pass

class EdgeNotFound(GraphError, LookupError):
    pass
