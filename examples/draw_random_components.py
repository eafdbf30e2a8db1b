import networkx as nx

from reachgraph.io.convert import from_nx
from reachgraph.viz.draw import draw_components

G = nx.gnm_random_graph(30, 18, seed=7)
g = from_nx(G)

print(g, "components:", len(g.connected_components()))
draw_components(g, seed=7, save_path="random_components.png")
print("saved random_components.png")
