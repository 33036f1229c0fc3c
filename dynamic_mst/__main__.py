"""Interactive menu over a dynamic graph."""

import argparse
import sys

from typing import List, Optional, TextIO

from pydantic import ValidationError

from dynamic_mst.config import GraphLimits
from dynamic_mst.dynamic_graph import DynamicGraph
from dynamic_mst.errors import CapacityExceeded, RemoveResult
from dynamic_mst.logging_config import setup_logging
from dynamic_mst.mst_builder import Disconnected, MstResult

MENU = "\nMenu:\n1. Add Edge\n2. Remove Edge\n3. Display MST\n4. Exit\nEnter your choice: "


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maintain a weighted graph and query its minimum spanning tree.")
    try:
        limits = GraphLimits.from_env()
    except ValidationError as error:
        parser.error(f"invalid limits in environment: {error}")

    parser.add_argument("--max-edges", type=int, default=limits.max_edges, help="Maximum number of stored edges")
    parser.add_argument("--max-nodes", type=int, default=limits.max_nodes,
                        help="Node identifiers must be below this value")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args(argv)

    try:
        args.limits = GraphLimits(max_edges=args.max_edges, max_nodes=args.max_nodes)
    except ValidationError as error:
        parser.error(f"invalid limits: {error}")
    return args


def format_mst(result: MstResult) -> str:
    if isinstance(result, Disconnected):
        return "Graph is disconnected. MST cannot be formed."

    lines = [f"Minimum Spanning Tree (Weight: {result.total_weight}):"]
    lines.extend(f"{edge.first_node} -- {edge.second_node} (weight: {edge.weight})" for edge in result.edges)
    return "\n".join(lines)


def _read_numbers(stdin: TextIO, count: int) -> Optional[List[int]]:
    line = stdin.readline()
    if not line:
        raise EOFError
    try:
        numbers = [int(token) for token in line.split()]
    except ValueError:
        return None
    return numbers if len(numbers) == count else None


def run_menu(graph: DynamicGraph, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    def write(text: str, end: str = "\n") -> None:
        stdout.write(text + end)
        stdout.flush()

    while True:
        write(MENU, end="")
        line = stdin.readline()
        choice = line.strip()
        if not line or choice == "4":
            write("Exiting program. Goodbye!")
            return 0

        try:
            if choice == "1":
                write("Enter edge (u v weight): ", end="")
                numbers = _read_numbers(stdin, 3)
                if numbers is None:
                    write("Invalid edge! Expected three integers.")
                    continue
                u, v, weight = numbers
                try:
                    graph.add_edge(u, v, weight)
                except (CapacityExceeded, ValueError) as error:
                    write(f"Edge {u} -- {v} was not added: {error}")
                    continue
                write(f"Edge {u} -- {v} (weight: {weight}) added.")
            elif choice == "2":
                write("Enter edge to remove (u v): ", end="")
                numbers = _read_numbers(stdin, 2)
                if numbers is None:
                    write("Invalid edge! Expected two integers.")
                    continue
                u, v = numbers
                if graph.remove_edge(u, v) is RemoveResult.REMOVED:
                    write(f"Edge {u} -- {v} removed.")
                else:
                    write(f"Edge {u} -- {v} does not exist.")
            elif choice == "3":
                write(format_mst(graph.compute_mst()))
            else:
                write("Invalid choice! Please try again.")
        except EOFError:
            write("")
            write("Exiting program. Goodbye!")
            return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)

    graph = DynamicGraph(args.limits)
    return run_menu(graph)


if __name__ == "__main__":
    raise SystemExit(main())
