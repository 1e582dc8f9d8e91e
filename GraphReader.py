from Graph import Graph
from GraphErrors import GraphFormatError, InvalidParameterError, SinkIOError
from GraphWriter import SECTION_SEPARATOR


def _parse_number(token, cast, line_number):
    try:
        return cast(token)
    except ValueError:
        raise GraphFormatError(f'{token!r} is not a number', line_number) from None


def parse_graph(lines):
    ''' Builds a Graph from text in the format written by GraphWriter. Accepts a string or an iterable of lines.'''
    if isinstance(lines, str):
        lines = lines.splitlines()
    g = Graph()
    in_edges = False
    for line_number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        if not in_edges and fields == [SECTION_SEPARATOR]:
            in_edges = True
            continue
        if len(fields) != 3:
            raise GraphFormatError(f'expected 3 fields, got {len(fields)}', line_number)
        try:
            if in_edges:
                from_node, to_node, w = fields
                g.add_edge_with_weight(from_node, to_node, _parse_number(w, float, line_number))
            else:
                vertex_id, x, y = fields
                g.add_vertex(vertex_id, _parse_number(x, int, line_number), _parse_number(y, int, line_number))
        except InvalidParameterError as e:
            raise GraphFormatError(str(e), line_number) from e
    if not in_edges:
        raise GraphFormatError(f'missing {SECTION_SEPARATOR!r} separator line')
    return g


def read_graph(filepath):
    try:
        with open(filepath, 'r') as file:
            return parse_graph(file)
    except OSError as e:
        raise SinkIOError(filepath, e.strerror or e) from e
