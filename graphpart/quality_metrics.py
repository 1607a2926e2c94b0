"""Quality measures of a graph partition: cuts, balance and communication volume."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from graphpart.config import FennelDynamics, PartitionConfig
from graphpart.graph import Graph
from graphpart.random_functions import approx_sqrt


def _blocks_of(graph: Graph, partition_map: Sequence[int] | None) -> Sequence[int]:
    return graph.partition if partition_map is None else partition_map


def fennel_weight(config: PartitionConfig) -> float:
    """Weight of the balance term of the Fennel objective for the current stream state."""
    dynamics = config.fennel_dynamics
    if dynamics is FennelDynamics.ORIGINAL:
        return 1.0
    if dynamics is FennelDynamics.DOUBLE:
        return 2.0
    if dynamics is FennelDynamics.EDGE_CUT:
        return 0.0

    ratio = config.remaining_stream_nodes / float(config.total_stream_edges)
    if dynamics is FennelDynamics.LINEAR:
        return 2 * ratio
    if dynamics is FennelDynamics.MID_LINEAR:
        tmp = 2 * ratio
        return 2 * tmp if tmp <= 1 else 2.0
    if dynamics is FennelDynamics.QUADRATIC:
        return 2 * ratio * ratio
    if dynamics is FennelDynamics.MID_QUADRATIC:
        tmp = 2 * ratio
        return 2 * tmp * tmp if tmp <= 1 else 2.0
    if dynamics is FennelDynamics.MID_CONSTANT:
        return 0.5 if ratio <= 1.5 else 2.0
    return 2.0


def fennel_objective(
    config: PartitionConfig,
    graph: Graph,
    fennel_gamma: float,
    fennel_alpha: float,
    partition_map: Sequence[int] | None = None,
) -> int:
    """Fennel objective of a partition, truncated to an integer.

    Each block's weight is the weight of the last node seen in it.
    """
    blocks = _blocks_of(graph, partition_map)
    weights = [0] * graph.partition_count
    interior = 0
    for node in graph.nodes():
        source = blocks[node]
        weights[source] = graph.node_weights[node]
        for edge in graph.out_edges(node):
            if blocks[graph.edge_target(edge)] == source:
                interior += graph.edge_weights[edge]

    alpha_gamma = fennel_gamma * fennel_alpha
    value = sum(alpha_gamma * w * approx_sqrt(w) for w in weights)
    value *= fennel_weight(config)
    value -= interior
    return int(value * 0.5)


def ghost_edge_cut(config: PartitionConfig, graph: Graph) -> int:
    """Weight of the ghost edges whose ends lie in different blocks."""
    cut = 0
    for ghostkey, edge_list in enumerate(config.ghostkey_to_edges):
        node = config.ghostkey_to_node[ghostkey]
        block = graph.partition[node]
        for target, weight in edge_list:
            if graph.partition[target] != block:
                cut += weight
    return cut


def edge_cut(graph: Graph, partition_map: Sequence[int] | None = None) -> int:
    """Total weight of the edges between different blocks."""
    blocks = _blocks_of(graph, partition_map)
    cut = 0
    for node in graph.nodes():
        source = blocks[node]
        for edge in graph.out_edges(node):
            if blocks[graph.edge_target(edge)] != source:
                cut += graph.edge_weights[edge]
    return cut // 2


def edge_cut_between(graph: Graph, lhs: int, rhs: int) -> int:
    """Weight of the edges leading from block ``lhs`` into block ``rhs``."""
    cut = 0
    for node in graph.nodes():
        if graph.partition[node] != lhs:
            continue
        for edge in graph.out_edges(node):
            if graph.partition[graph.edge_target(edge)] == rhs:
                cut += graph.edge_weights[edge]
    return cut


def edge_cut_full_stream(
    config: PartitionConfig,
    graph: Graph,
    edges_virtual_real: Sequence[Sequence[int]],
) -> int:
    """Cut of the first ``config.nmb_nodes`` nodes given per-block edge weights."""
    blocks = len(edges_virtual_real[0])
    cut = 0
    for node in graph.nodes():
        if node >= config.nmb_nodes:
            break
        source = graph.partition[node]
        row = edges_virtual_real[node]
        cut += sum(row[i] for i in range(blocks) if i != source)
    return cut


class _UnionFind:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1


def edge_cut_connected(graph: Graph, partition_map: Sequence[int] | None = None) -> int:
    """Edge cut, penalised when blocks are not connected.

    When the number of connected pieces of the blocks differs from the number
    of blocks, the total edge weight times the number of pieces is added.
    """
    blocks = _blocks_of(graph, partition_map)
    cut = 0
    total_weight = 0
    pieces = _UnionFind(graph.number_of_nodes())
    for node in graph.nodes():
        source = blocks[node]
        for edge in graph.out_edges(node):
            target = graph.edge_target(edge)
            weight = graph.edge_weights[edge]
            if blocks[target] != source:
                cut += weight
            else:
                pieces.union(node, target)
            total_weight += weight

    components = len({pieces.find(node) for node in graph.nodes()})
    print(f"number of connected comp {components}")
    if components == graph.partition_count:
        return cut // 2
    return cut // 2 + total_weight * components


def _block_volumes(graph: Graph, blocks: Sequence[int]) -> list[int]:
    volumes = [0] * graph.partition_count
    for node in graph.nodes():
        block = blocks[node]
        incident = {blocks[target] for target in graph.neighbors(node)}
        incident.discard(block)
        volumes[block] += len(incident)
    return volumes


def max_communication_volume(
    graph: Graph, partition_map: Sequence[int] | None = None
) -> int:
    """Largest communication volume of any block."""
    return max(_block_volumes(graph, _blocks_of(graph, partition_map)))


def min_communication_volume(graph: Graph) -> int:
    """Smallest communication volume of any block."""
    return min(_block_volumes(graph, graph.partition))


def total_communication_volume(graph: Graph) -> int:
    """Sum of the communication volumes of all blocks."""
    return sum(_block_volumes(graph, graph.partition))


def boundary_nodes(graph: Graph) -> int:
    """Number of nodes with at least one neighbour in another block."""
    return sum(
        1
        for node in graph.nodes()
        if any(
            graph.partition[target] != graph.partition[node]
            for target in graph.neighbors(node)
        )
    )


def _block_weights(graph: Graph) -> list[int]:
    weights = [0] * graph.partition_count
    for node in graph.nodes():
        weights[graph.partition[node]] += graph.node_weights[node]
    return weights


def balance_separator(graph: Graph) -> float:
    """Heaviest non-separator block relative to an even share over the other blocks."""
    weights = _block_weights(graph)
    overall = float(sum(weights))
    share = math.ceil(overall / (graph.partition_count - 1))
    heaviest = max(
        (
            float(w)
            for block, w in enumerate(weights)
            if block != graph.separator_block
        ),
        default=-1.0,
    )
    return heaviest / share


def separator_weight(graph: Graph) -> int:
    """Total node weight of the separator block."""
    return sum(
        graph.node_weights[node]
        for node in graph.nodes()
        if graph.partition[node] == graph.separator_block
    )


def balance_full_stream(block_weights: Sequence[int]) -> float:
    """Heaviest block relative to an even share, from a list of block weights."""
    total = float(sum(block_weights))
    heaviest = max((float(w) for w in block_weights), default=0.0)
    heaviest = max(heaviest, 0.0)
    share = math.ceil(total / len(block_weights))
    return heaviest / share


def _relative_max(per_block: Sequence[float], overall: float, count: int) -> float:
    share = math.ceil(overall / count)
    heaviest = max((float(w) for w in per_block), default=-1.0)
    return heaviest / share


def balance(graph: Graph) -> float:
    """Heaviest block weight relative to an even share of the node weight."""
    weights = _block_weights(graph)
    return _relative_max(weights, float(sum(weights)), graph.partition_count)


def edge_balance(graph: Graph, edge_partition: Sequence[int]) -> float:
    """Largest number of edges in a block relative to an even share of the edges."""
    counts = [0] * graph.partition_count
    for edge in graph.edges():
        counts[edge_partition[edge]] += 1
    return _relative_max(counts, float(graph.number_of_edges()), graph.partition_count)


def balance_edges(graph: Graph) -> float:
    """Largest total degree of a block relative to an even share of all degrees."""
    degrees = [0] * graph.partition_count
    for node in graph.nodes():
        degrees[graph.partition[node]] += graph.degree(node)
    return _relative_max(degrees, float(sum(degrees)), graph.partition_count)


def objective(
    config: PartitionConfig | Any,
    graph: Graph,
    partition_map: Sequence[int] | None = None,
) -> int:
    """The measure the configuration asks to optimise."""
    if config.mh_optimize_communication_volume:
        return max_communication_volume(graph, partition_map)
    if config.mh_penalty_for_unconnected:
        return edge_cut_connected(graph, partition_map)
    return edge_cut(graph, partition_map)