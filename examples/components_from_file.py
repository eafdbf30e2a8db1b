import sys

from reachgraph.io.tuples import read_graph

path = sys.argv[1] if len(sys.argv) > 1 else "graph.txt"
g = read_graph(path)

comps = g.connected_components()
print(g)
print("components:", len(comps))
for i, comp in enumerate(comps):
    print(f"  [{i}] size={len(comp)}:", comp)

if len(sys.argv) > 3:
    v, w = int(sys.argv[2]), int(sys.argv[3])
    print(f"reachable({v}, {w}):", g.is_reachable(v, w))
