from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from reachgraph.graph import Graph, Vertex
from reachgraph.io.convert import to_nx


def component_layout(graph: Graph, seed: int = 7, spacing: float = 3.0) -> Dict[Vertex, Tuple[float, float]]:
    """
    Spring layout per component, with components placed on a square grid
    in connected_components() order so they never overlap.
    """
    G = to_nx(graph)
    comps = graph.connected_components()
    cols = max(1, math.ceil(math.sqrt(len(comps))))

    pos: Dict[Vertex, Tuple[float, float]] = {}
    for i, comp in enumerate(comps):
        ox, oy = spacing * (i % cols), -spacing * (i // cols)
        if len(comp) == 1:
            pos[comp[0]] = (ox, oy)
            continue
        sub = nx.spring_layout(G.subgraph(comp), seed=seed, iterations=200)
        for v, (x, y) in sub.items():
            pos[v] = (ox + float(x), oy + float(y))
    return pos


def draw_components(
    graph: Graph,
    *,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    max_nodes_to_draw: int = 600,
    with_labels: bool = True,
    ax=None,
    save_path: Optional[str] = None,
):
    """
    Draw *graph* with each connected component in its own colour.

    If save_path is set, the figure is saved as an image and closed.
    Returns the matplotlib Axes.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    comps = graph.connected_components()
    ax.set_title(f"|V|={len(graph)}  |E|={len(graph.edges)}  components={len(comps)}")
    ax.set_axis_off()

    if len(graph) > max_nodes_to_draw:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={len(graph)})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )
    elif len(graph) > 0:
        colour_of = {v: i for i, comp in enumerate(comps) for v in comp}
        G = to_nx(graph)
        nodes = list(G.nodes())
        nx.draw_networkx(
            G,
            pos=component_layout(graph, seed=seed),
            ax=ax,
            nodelist=nodes,
            node_color=[colour_of[v] for v in nodes],
            cmap=plt.get_cmap("tab20"),
            vmin=0,
            vmax=max(len(comps) - 1, 1),
            with_labels=with_labels,
            node_size=node_size,
            width=edge_width,
        )

    if save_path:
        fig.tight_layout()
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    return ax
