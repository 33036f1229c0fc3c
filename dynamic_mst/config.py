from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_EDGES = 1000
DEFAULT_MAX_NODES = 100


class GraphLimits(BaseSettings):
    """Capacity of a graph store.

    Node identifiers are valid in ``0 .. max_nodes - 1``; at most ``max_edges`` edges are stored at once.
    Unset fields are read from ``DYNAMIC_MST_MAX_EDGES`` / ``DYNAMIC_MST_MAX_NODES``.
    """

    model_config = SettingsConfigDict(env_prefix="DYNAMIC_MST_", frozen=True)

    max_edges: int = Field(default=DEFAULT_MAX_EDGES, gt=0, description="Maximum number of stored edges")
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, gt=0, description="Node identifiers must be below this value")

    @property
    def max_node_index(self) -> int:
        return self.max_nodes - 1

    @classmethod
    def from_env(cls) -> "GraphLimits":
        return cls()
