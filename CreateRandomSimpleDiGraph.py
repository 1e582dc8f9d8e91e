import configparser
import os
import sys

from GraphErrors import GraphError
from GraphWriter import GRAPH_DIR, graph_file_name, print_graph_to_file
from utils.graph_generator import COORDINATE_BOUND, create_random_graph

script_dir = os.path.abspath(os.path.dirname(__file__))

DEFAULT_MAX_NODES = 5000
DEFAULT_MAX_EXTRA_EDGES = 10


def load_config(path=None):
    config = configparser.ConfigParser()
    config.read(path or script_dir + r'/application.properties')
    section = config['DEFAULT']
    return {
        'max_nodes': section.getint('graph.max_nodes', fallback=DEFAULT_MAX_NODES),
        'max_extra_edges': section.getint('graph.max_extra_edges', fallback=DEFAULT_MAX_EXTRA_EDGES),
        'coordinate_bound': section.getint('graph.coordinate_bound', fallback=COORDINATE_BOUND),
        'output_dir': section.get('graph.output_dir', fallback=GRAPH_DIR),
    }


def create_graph_file(max_nodes, max_extra_edges, config, rng=None, progress=True):
    g = create_random_graph(max_nodes, max_extra_edges, coordinate_bound=config['coordinate_bound'], rng=rng,
                            progress=progress)
    filepath = graph_file_name(max_nodes, config['output_dir'])
    print(f'Writing Graph with {max_nodes} nodes to {filepath}')
    print_graph_to_file(g, filepath)
    print(f'Done Creating {filepath}')
    return filepath


# empty answer keeps the configured default
def read_int(prompt, lowest, default):
    answer = input(f'{prompt}[{default}] ').strip()
    if not answer:
        return default
    value = int(answer)
    if value < lowest:
        raise ValueError(f'{value} < {lowest}')
    return value


def main():
    try:
        config = load_config()
    except (ValueError, configparser.Error) as e:
        print(f'Invalid configuration: {e}')
        sys.exit(1)

    try:
        max_nodes = read_int('Number Of Nodes? ', 1, config['max_nodes'])
        max_extra_edges = read_int('Max Extra Edges To Add Per Vertex? ', 0, config['max_extra_edges'])
    except (ValueError, EOFError):
        print('Invalid input - insert a number')
        sys.exit(1)

    try:
        create_graph_file(max_nodes, max_extra_edges, config)
    except GraphError as e:
        print(f'Failed to create graph: {e}')
        sys.exit(1)


if __name__ == '__main__':
    main()
