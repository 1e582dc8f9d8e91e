import sys

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection

from GraphReader import read_graph


def draw_graph(g, filepath=None, title=None, with_labels=True):
    vertices = g.vertices()
    index = {v.id: i for i, v in enumerate(vertices)}
    coords = np.array([(v.x, v.y) for v in vertices], dtype=float).reshape(-1, 2)
    segments = np.array([(coords[index[g.edge_source(e)]], coords[index[g.edge_target(e)]]) for e in g.edges()],
                        dtype=float).reshape(-1, 2, 2)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.add_collection(LineCollection(segments, colors='gray', linewidths=0.5, alpha=0.6))
    ax.scatter(coords[:, 0], coords[:, 1], s=12, c='tab:blue', zorder=2)
    if with_labels:
        for v, (x, y) in zip(vertices, coords):
            ax.annotate(v.id, (x, y), fontsize=7, xytext=(2, 2), textcoords='offset points')
    ax.set_aspect('equal')
    ax.autoscale()
    ax.set_title(title or f'{g.vertex_count()} vertices, {g.edge_count()} edges')

    if filepath is not None:
        fig.savefig(filepath)
    else:
        plt.show()
    return fig


def main():
    if len(sys.argv) < 2:
        print(f'Usage: {sys.argv[0]} <graph_file> [<image_file>]')
        sys.exit(1)
    g = read_graph(sys.argv[1])
    draw_graph(g, sys.argv[2] if len(sys.argv) > 2 else None, title=sys.argv[1])


if __name__ == '__main__':
    main()
