import logging
import numbers

import numpy as np

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from dynamic_mst.config import GraphLimits
from dynamic_mst.errors import CapacityExceeded, RemoveResult

logger = logging.getLogger(__name__)

_WEIGHT_INFO = np.iinfo(np.int64)


@dataclass(frozen=True)
class Edge(object):
    first_node: int
    second_node: int
    weight: int

    @property
    def nodes(self) -> Tuple[int, int]:
        return self.first_node, self.second_node

    def __iter__(self) -> Iterator[int]:
        return iter((self.first_node, self.second_node, self.weight))


def _check_integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


class GraphStore(object):
    """Ordered edge collection of an undirected weighted graph.

    Edges keep their insertion order, parallel edges are stored independently, and the node count only grows:
    removing an edge never forgets the nodes it touched.
    """

    limits: GraphLimits

    __edges: List[Edge]
    __node_count: int

    def __init__(self, limits: Optional[GraphLimits] = None):
        self.limits = limits if limits is not None else GraphLimits()
        self.__edges = list()
        self.__node_count = 0

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self.__edges)

    @property
    def node_count(self) -> int:
        return self.__node_count

    def __len__(self) -> int:
        return len(self.__edges)

    def add_edge(self, first_node: int, second_node: int, weight: int) -> Edge:
        first_node = _check_integer("first_node", first_node)
        second_node = _check_integer("second_node", second_node)
        weight = _check_integer("weight", weight)

        for node in (first_node, second_node):
            if node < 0:
                raise ValueError(f"node identifiers must be non-negative, got {node}")
            if node > self.limits.max_node_index:
                logger.info("Rejected edge %d -- %d: node %d is out of range", first_node, second_node, node)
                raise CapacityExceeded("max_nodes", self.limits.max_node_index, node)
        if not _WEIGHT_INFO.min <= weight <= _WEIGHT_INFO.max:
            raise ValueError(f"weight {weight} does not fit into a signed 64-bit integer")
        if len(self.__edges) + 1 > self.limits.max_edges:
            logger.info("Rejected edge %d -- %d: edge storage is full", first_node, second_node)
            raise CapacityExceeded("max_edges", self.limits.max_edges, len(self.__edges) + 1)

        edge = Edge(first_node, second_node, weight)
        self.__edges.append(edge)
        self.__node_count = max(self.__node_count, first_node + 1, second_node + 1)
        logger.debug("Added edge %d -- %d (weight: %d), node count %d", first_node, second_node, weight,
                     self.__node_count)

        return edge

    def remove_edge(self, first_node: int, second_node: int) -> RemoveResult:
        first_node = _check_integer("first_node", first_node)
        second_node = _check_integer("second_node", second_node)

        # Endpoint order matters: (v, u) does not match an edge stored as (u, v).
        for index, edge in enumerate(self.__edges):
            if edge.first_node == first_node and edge.second_node == second_node:
                del self.__edges[index]
                logger.debug("Removed edge %s -- %s", first_node, second_node)
                return RemoveResult.REMOVED

        logger.info("Edge %s -- %s does not exist", first_node, second_node)
        return RemoveResult.NOT_FOUND
