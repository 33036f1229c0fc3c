import numpy as np

from numba import njit


@njit(cache=True, nogil=True)
def find_root(parent: np.ndarray, node: int) -> int:
    root = node
    while parent[root] != root:
        root = parent[root]

    # Second pass: repoint every node on the walked path straight at the root.
    while parent[node] != root:
        next_node = parent[node]
        parent[node] = root
        node = next_node

    return root


@njit(cache=True, nogil=True)
def unite(parent: np.ndarray, rank: np.ndarray, first: int, second: int) -> bool:
    first_root = find_root(parent, first)
    second_root = find_root(parent, second)

    if first_root == second_root:
        return False

    if rank[first_root] > rank[second_root]:
        parent[second_root] = first_root
    elif rank[first_root] < rank[second_root]:
        parent[first_root] = second_root
    else:
        parent[second_root] = first_root
        rank[first_root] += 1

    return True


class DisjointSetForest(object):
    """Union-find over nodes ``0 .. size - 1`` with path compression and union by rank."""

    parent: np.ndarray
    rank: np.ndarray

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent = np.arange(size, dtype=np.int64)
        self.rank = np.zeros((size,), dtype=np.int64)

    @property
    def size(self) -> int:
        return self.parent.shape[0]

    @property
    def components(self) -> int:
        return int(np.count_nonzero(self.parent == np.arange(self.size)))

    def find(self, node: int) -> int:
        self.__check_node(node)
        return int(find_root(self.parent, node))

    def union(self, first: int, second: int) -> bool:
        """Merges the sets of both nodes. Returns False when they already share a root."""
        self.__check_node(first)
        self.__check_node(second)
        return bool(unite(self.parent, self.rank, first, second))

    def is_connected(self, first: int, second: int) -> bool:
        return self.find(first) == self.find(second)

    def get_roots(self) -> list:
        return np.flatnonzero(self.parent == np.arange(self.size)).tolist()

    def __check_node(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"node {node} is out of range for a forest of size {self.size}")
