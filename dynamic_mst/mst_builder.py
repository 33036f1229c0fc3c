import logging

import numpy as np

from abc import ABC
from dataclasses import dataclass
from typing import Tuple, Union

from dynamic_mst.disjoint_set import DisjointSetForest
from dynamic_mst.graph_store import Edge, GraphStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MinimumSpanningTree(object):
    edges: Tuple[Edge, ...]
    total_weight: int

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class Disconnected(object):
    """No single tree spans every node; ``edges`` is the minimum spanning forest that was found instead."""

    edges: Tuple[Edge, ...]
    node_count: int
    components: int

    def __len__(self) -> int:
        return len(self.edges)


MstResult = Union[MinimumSpanningTree, Disconnected]


class MstBuilder(ABC):
    @staticmethod
    def compute(graph: GraphStore) -> MstResult:
        """Runs Kruskal's algorithm over the current edges of ``graph``.

        Edges are scanned in ascending weight order; equal weights keep their insertion order, so the selection is
        deterministic. The graph itself is never reordered.
        """
        edges = graph.edges
        node_count = graph.node_count
        forest = DisjointSetForest(node_count)

        weights = np.fromiter((edge.weight for edge in edges), dtype=np.int64, count=len(edges))
        order = np.argsort(weights, kind="stable")

        selected = list()
        total_weight = 0
        for index in order:
            if len(selected) >= node_count - 1:
                break

            edge = edges[index]
            if forest.union(edge.first_node, edge.second_node):
                selected.append(edge)
                total_weight += edge.weight

        if len(selected) == node_count - 1:
            logger.debug("Spanning tree over %d nodes with weight %d", node_count, total_weight)
            return MinimumSpanningTree(edges=tuple(selected), total_weight=total_weight)

        components = node_count - len(selected)
        logger.debug("Graph over %d nodes is disconnected into %d components", node_count, components)
        return Disconnected(edges=tuple(selected), node_count=node_count, components=components)
