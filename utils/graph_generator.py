import math
import random
import warnings

from tqdm import tqdm

from Graph import Graph
from GraphErrors import InvalidParameterError

COORDINATE_BOUND = 600


def edge_weight(a, b):
    return round(math.hypot(a.x - b.x, a.y - b.y), 2)


def _check_int(name, value, lowest):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f'{name} must be an integer, got {value!r}')
    if value < lowest:
        raise InvalidParameterError(f'{name} must be >= {lowest}, got {value}')


def _add_random_vertex(g, vertex_id, rng, coordinate_bound):
    return g.add_vertex(vertex_id, rng.randrange(coordinate_bound), rng.randrange(coordinate_bound))


def _link_both_ways(g, a, b):
    weight = edge_weight(a, b)
    g.add_edge_with_weight(a.id, b.id, weight)
    g.add_edge_with_weight(b.id, a.id, weight)


# every vertex links both ways to an already reachable vertex, so the result is strongly connected
def create_random_graph(max_vertices, max_extra_edges, coordinate_bound=COORDINATE_BOUND, rng=None, graph=None,
                        progress=False):
    _check_int('max_vertices', max_vertices, 1)
    _check_int('max_extra_edges', max_extra_edges, 0)
    _check_int('coordinate_bound', coordinate_bound, 1)
    if rng is None:
        rng = random.Random()
    g = graph if graph is not None else Graph()

    # append-only while growing, read-only while adding extra edges
    vertices = g.vertices()
    next_id = len(vertices)
    # new ids must be free before the supplied graph is touched
    taken = [str(i) for i in range(next_id, max_vertices) if str(i) in g.id_to_vertex]
    if taken:
        raise InvalidParameterError(f'vertex ids {", ".join(taken)} are already in the supplied graph')
    if not vertices:
        vertices.append(_add_random_vertex(g, next_id, rng, coordinate_bound))
        next_id += 1

    for _ in tqdm(range(len(vertices), max_vertices), disable=not progress, desc='vertices'):
        anchor = vertices[rng.randrange(len(vertices))]
        new_vertex = _add_random_vertex(g, next_id, rng, coordinate_bound)
        vertices.append(new_vertex)
        next_id += 1
        _link_both_ways(g, new_vertex, anchor)

    if max_extra_edges > 0:
        add_extra_edges(g, vertices, max_extra_edges, rng)
    return g


def add_extra_edges(g, vertices, max_extra_edges, rng):
    n = len(vertices)
    if n < 2:
        warnings.warn(f'graph has {n} vertex, no extra edges can be added without a self-loop', RuntimeWarning)
        return
    for i, v in enumerate(vertices):
        extra_cnt = rng.randint(1, max_extra_edges)
        for _ in range(extra_cnt):
            # draw among the other n - 1 vertices
            j = rng.randrange(n - 1)
            if j >= i:
                j += 1
            _link_both_ways(g, v, vertices[j])
