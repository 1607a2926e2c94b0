"""Weighted graphs in adjacency-array form and extraction of block subgraphs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import accumulate


class Graph:
    """Weighted graph stored as adjacency arrays, with a block index per node.

    Edges are numbered consecutively in node order, so the out-edges of a node
    form a contiguous range.  ``node_weights``, ``edge_weights`` and
    ``partition`` are plain lists that callers may read and update in place.
    """

    def __init__(
        self,
        adjacency: Iterable[Iterable[int]],
        node_weights: Sequence[int] | None = None,
        edge_weights: Iterable[Iterable[int]] | None = None,
        partition: Sequence[int] | None = None,
        partition_count: int | None = None,
        implicit_ghost_nodes: Sequence[int] | None = None,
        separator_block: int | None = None,
    ) -> None:
        rows = [list(row) for row in adjacency]
        n = len(rows)
        self._first_edge = [0, *accumulate(len(row) for row in rows)]
        self._targets = [target for row in rows for target in row]
        bad = [t for t in self._targets if not 0 <= t < n]
        if bad:
            raise ValueError(f"edge target {bad[0]} is not a node of the graph")
        m = len(self._targets)

        self.node_weights = [1] * n if node_weights is None else list(node_weights)
        if len(self.node_weights) != n:
            raise ValueError("node_weights must hold one weight per node")

        if edge_weights is None:
            self.edge_weights = [1] * m
        else:
            weight_rows = [list(row) for row in edge_weights]
            if len(weight_rows) != n or any(
                len(w) != len(r) for w, r in zip(weight_rows, rows)
            ):
                raise ValueError("edge_weights must match the shape of adjacency")
            self.edge_weights = [w for row in weight_rows for w in row]

        self.partition = [0] * n if partition is None else list(partition)
        if len(self.partition) != n:
            raise ValueError("partition must hold one block index per node")

        if partition_count is None:
            partition_count = max(self.partition, default=0) + 1
        self.partition_count = partition_count

        if implicit_ghost_nodes is None:
            self.implicit_ghost_nodes = [0] * n
            self._compressed_ghosts = False
        else:
            self.implicit_ghost_nodes = list(implicit_ghost_nodes)
            if len(self.implicit_ghost_nodes) != n:
                raise ValueError("implicit_ghost_nodes must hold one count per node")
            self._compressed_ghosts = True

        self.separator_block = separator_block

    def number_of_nodes(self) -> int:
        return len(self.node_weights)

    def number_of_edges(self) -> int:
        return len(self._targets)

    def has_compressed_ghost_nodes(self) -> bool:
        """True when per-node implicit ghost node counts were supplied."""
        return self._compressed_ghosts

    def nodes(self) -> range:
        return range(self.number_of_nodes())

    def edges(self) -> range:
        return range(self.number_of_edges())

    def out_edges(self, node: int) -> range:
        return range(self._first_edge[node], self._first_edge[node + 1])

    def edge_target(self, edge: int) -> int:
        return self._targets[edge]

    def degree(self, node: int) -> int:
        return self._first_edge[node + 1] - self._first_edge[node]

    def neighbors(self, node: int) -> Iterator[int]:
        """Yield the target of every out-edge of ``node`` in edge order."""
        for edge in self.out_edges(node):
            yield self._targets[edge]

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.number_of_nodes()}, edges={self.number_of_edges()}, "
            f"partition_count={self.partition_count})"
        )


@dataclass
class ExtractedBlock:
    """A subgraph cut out of a larger graph.

    ``mapping[i]`` is the node of the original graph that became node ``i``;
    ``weight`` is the total node weight of the extracted nodes.
    """

    graph: Graph
    mapping: list[int]
    weight: int


def _induced(
    graph: Graph,
    members: Sequence[int],
    keep: Callable[[int], bool],
    reverse: Callable[[int], int],
    partition: Sequence[int] | None = None,
    partition_count: int | None = None,
) -> ExtractedBlock:
    adjacency: list[list[int]] = []
    weights: list[list[int]] = []
    for node in members:
        row: list[int] = []
        wrow: list[int] = []
        for edge in graph.out_edges(node):
            target = graph.edge_target(edge)
            if keep(target):
                row.append(reverse(target))
                wrow.append(graph.edge_weights[edge])
        adjacency.append(row)
        weights.append(wrow)
    node_weights = [graph.node_weights[node] for node in members]
    sub = Graph(
        adjacency,
        node_weights=node_weights,
        edge_weights=weights,
        partition=partition,
        partition_count=partition_count,
    )
    return ExtractedBlock(sub, list(members), sum(node_weights))


def extract_block(graph: Graph, block: int) -> ExtractedBlock:
    """Extract the subgraph induced by the nodes assigned to ``block``."""
    members = [node for node in graph.nodes() if graph.partition[node] == block]
    reverse = {node: new for new, node in enumerate(members)}
    return _induced(
        graph,
        members,
        keep=lambda target: graph.partition[target] == block,
        reverse=reverse.__getitem__,
    )


def extract_two_blocks(graph: Graph) -> tuple[ExtractedBlock, ExtractedBlock]:
    """Split a graph into the block 0 side and everything else.

    Nodes outside block 0 all go to the right-hand side, but only edges whose
    target lies in block 1 are kept there.
    """
    lhs, rhs = 0, 1
    lhs_nodes = [node for node in graph.nodes() if graph.partition[node] == lhs]
    rhs_nodes = [node for node in graph.nodes() if graph.partition[node] != lhs]
    lhs_reverse = {node: new for new, node in enumerate(lhs_nodes)}
    rhs_reverse = {node: new for new, node in enumerate(rhs_nodes)}
    left = _induced(
        graph,
        lhs_nodes,
        keep=lambda target: graph.partition[target] == lhs,
        reverse=lhs_reverse.__getitem__,
    )
    right = _induced(
        graph,
        rhs_nodes,
        keep=lambda target: graph.partition[target] == rhs,
        reverse=rhs_reverse.__getitem__,
    )
    return left, right


def extract_two_blocks_connected(
    graph: Graph,
    lhs_nodes: Sequence[int],
    rhs_nodes: Sequence[int],
    lhs: int,
    rhs: int,
) -> ExtractedBlock:
    """Extract the subgraph on the given nodes of two blocks.

    The listed left nodes come first and get block 0, the right nodes follow
    with block 1.  Edges to any node of block ``lhs`` or ``rhs`` are kept;
    a kept target that is in neither list is mapped to new node 0.
    """
    members = [*lhs_nodes, *rhs_nodes]
    reverse = {node: new for new, node in enumerate(members)}
    partition = [0] * len(lhs_nodes) + [1] * len(rhs_nodes)
    return _induced(
        graph,
        members,
        keep=lambda target: graph.partition[target] in (lhs, rhs),
        reverse=lambda target: reverse.get(target, 0),
        partition=partition,
        partition_count=2,
    )