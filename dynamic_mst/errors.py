from enum import Enum


class CapacityExceeded(Exception):
    """An edge insertion would exceed the configured edge count or node index limit."""

    limit_name: str
    limit: int
    value: int

    def __init__(self, limit_name: str, limit: int, value: int):
        self.limit_name = limit_name
        self.limit = limit
        self.value = value
        super().__init__(f"{limit_name} exceeded: {value} (limit {limit})")


class RemoveResult(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"

    def __bool__(self):
        return self is RemoveResult.REMOVED
