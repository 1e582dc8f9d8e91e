import networkx as nx

from GraphErrors import InvalidParameterError


class Vertex:
    __slots__ = ('id', 'x', 'y')

    def __init__(self, vertex_id, x, y) -> None:
        object.__setattr__(self, 'id', str(vertex_id))
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __setattr__(self, key, value):
        raise AttributeError(f'Vertex is immutable, cannot set {key}')

    def __reduce__(self):
        return Vertex, (self.id, self.x, self.y)

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return (self.id, self.x, self.y) == (other.id, other.x, other.y)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return f'Vertex({self.id!r}, {self.x}, {self.y})'

    def __str__(self):
        return self.id


class Graph:
    ''' Simple weighted digraph over networkx.DiGraph.

    Vertices are keyed by their text id and keep insertion order. Edges are
    (source_id, target_id) tuples; at most one edge exists per ordered pair
    and self-loops are rejected.
    '''

    def __init__(self) -> None:
        self.graph = nx.DiGraph()
        self.id_to_vertex = {}

    def add_vertex(self, vertex_id, x, y) -> Vertex:
        vertex = Vertex(vertex_id, x, y)
        if vertex.id in self.id_to_vertex:
            raise InvalidParameterError(f'vertex {vertex.id} already exists')
        self.graph.add_node(vertex.id, x=x, y=y)
        self.id_to_vertex[vertex.id] = vertex
        return vertex

    def add_edge_with_weight(self, source, target, weight) -> bool:
        ''' Adds source -> target. Returns False and keeps the existing weight if the edge is already present.'''
        source_id, target_id = str(source), str(target)
        for vertex_id in (source_id, target_id):
            if vertex_id not in self.id_to_vertex:
                raise InvalidParameterError(f'unknown vertex {vertex_id}')
        if source_id == target_id:
            raise InvalidParameterError(f'self-loop on vertex {source_id}')
        if self.graph.has_edge(source_id, target_id):
            return False
        self.graph.add_edge(source_id, target_id, weight=weight)
        return True

    def get_vertex(self, vertex_id) -> Vertex:
        return self.id_to_vertex[str(vertex_id)]

    def vertices(self) -> list:
        return [self.id_to_vertex[v] for v in self.graph.nodes]

    def edges(self) -> list:
        return list(self.graph.edges)

    def vertex_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def has_edge(self, source, target) -> bool:
        return self.graph.has_edge(str(source), str(target))

    def edge_source(self, edge) -> str:
        return edge[0]

    def edge_target(self, edge) -> str:
        return edge[1]

    def edge_weight(self, edge) -> float:
        return self.graph.edges[edge]['weight']
