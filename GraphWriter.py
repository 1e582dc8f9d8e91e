import io
import os
import sys

from GraphErrors import SinkIOError

GRAPH_DIR = 'graphs'
SECTION_SEPARATOR = '$'


def graph_file_name(vertex_count, directory=GRAPH_DIR):
    return os.path.join(directory, f'graph_{vertex_count}.txt')


def write_graph(g, sink):
    ''' Writes the graph to an open text sink:

    <vertex_id> <x> <y>
    ...
    $
    <source_id> <target_id> <weight>
    ...
    '''
    for v in g.vertices():
        sink.write(f'{v.id} {int(v.x)} {int(v.y)}\n')

    sink.write(f'{SECTION_SEPARATOR}\n')

    for e in g.edges():
        sink.write(f'{g.edge_source(e)} {g.edge_target(e)} {g.edge_weight(e)!r}\n')


def serialize_graph(g):
    buffer = io.StringIO()
    write_graph(g, buffer)
    return buffer.getvalue()


def print_graph_to_file(g, filepath):
    ''' Writes the graph to filepath, replacing any existing file. On failure the partial file is removed
    and SinkIOError is raised.'''
    opened = False
    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filepath, 'w') as file:
            opened = True
            write_graph(g, file)
    except OSError as e:
        if opened:
            _remove_partial(filepath)
        raise SinkIOError(filepath, e.strerror or e) from e
    return filepath


def _remove_partial(filepath):
    try:
        os.remove(filepath)
    except FileNotFoundError:
        pass


def print_graph(g, out=None):
    if out is None:
        out = sys.stdout
    for v in g.vertices():
        print(f'{v.id} <{v.x}, {v.y}>', file=out)
    for e in g.edges():
        print(f'({g.edge_source(e)} : {g.edge_target(e)})', file=out)
