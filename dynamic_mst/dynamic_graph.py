from typing import Optional, Tuple

from dynamic_mst.config import GraphLimits
from dynamic_mst.errors import RemoveResult
from dynamic_mst.graph_store import Edge, GraphStore
from dynamic_mst.mst_builder import MstBuilder, MstResult


class DynamicGraph(object):
    """Mutable weighted graph answering minimum spanning tree queries.

    Every query recomputes the forest from the current edge set.
    """

    graph: GraphStore

    def __init__(self, limits: Optional[GraphLimits] = None):
        self.graph = GraphStore(limits)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self.graph.edges

    @property
    def node_count(self) -> int:
        return self.graph.node_count

    def add_edge(self, first_node: int, second_node: int, weight: int) -> Edge:
        return self.graph.add_edge(first_node, second_node, weight)

    def remove_edge(self, first_node: int, second_node: int) -> RemoveResult:
        return self.graph.remove_edge(first_node, second_node)

    def compute_mst(self) -> MstResult:
        return MstBuilder.compute(self.graph)
