"""Post-processing helpers for partitions: singleton balancing and sanity checks."""

from __future__ import annotations

from graphpart.config import PartitionConfig
from graphpart.graph import Graph
from graphpart.quality_metrics import balance


def balance_singletons(config: PartitionConfig, graph: Graph) -> None:
    """Move every isolated node into the block that is currently lightest.

    Block weights are tracked over ``config.k`` blocks; on ties the block with
    the lowest index wins.  The resulting balance is printed as a log line.
    """
    block_sizes = [0] * config.k
    singletons = []
    for node in graph.nodes():
        block_sizes[graph.partition[node]] += graph.node_weights[node]
        if graph.degree(node) == 0:
            singletons.append(node)

    for node in singletons:
        lightest = min(range(config.k), key=block_sizes.__getitem__)
        weight = graph.node_weights[node]
        block_sizes[graph.partition[node]] -= weight
        block_sizes[lightest] += weight
        graph.partition[node] = lightest

    print(f"log> balance after assigning singletons {balance(graph)}")


def has_kway_partition(config: PartitionConfig, graph: Graph) -> bool:
    """True when each of the ``config.k`` blocks holds at least one node."""
    present = set(graph.partition)
    return all(block in present for block in range(config.k))