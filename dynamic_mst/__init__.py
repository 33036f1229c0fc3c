from dynamic_mst.config import GraphLimits
from dynamic_mst.errors import CapacityExceeded, RemoveResult
from dynamic_mst.graph_store import Edge, GraphStore
from dynamic_mst.disjoint_set import DisjointSetForest
from dynamic_mst.mst_builder import MstBuilder, MinimumSpanningTree, Disconnected
from dynamic_mst.dynamic_graph import DynamicGraph
