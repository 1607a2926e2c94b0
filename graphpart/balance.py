"""Derivation of block weight limits from a configuration and a graph."""

from __future__ import annotations

import math
import operator
from itertools import accumulate

from graphpart.config import PartitionConfig
from graphpart.graph import Graph


def configure_balance(
    config: PartitionConfig, graph: Graph, already_partitioned: bool = False
) -> None:
    """Set the balance limits of ``config`` for partitioning ``graph``.

    When edges are to be balanced (and the imbalance is not zero) every node's
    weight is increased by its weighted degree, in place.
    """
    largest_graph_weight = sum(graph.node_weights)

    edge_weights = 0
    if config.balance_edges and config.imbalance != 0:
        # perfect balance requires uniform node weights, so edges stay out of it
        for node in graph.nodes():
            weighted_degree = sum(graph.edge_weights[e] for e in graph.out_edges(node))
            edge_weights += weighted_degree
            graph.node_weights[node] += weighted_degree

    epsilon = config.imbalance / 100.0
    k = config.k
    if config.imbalance == 0 and not config.kaffpa_e:
        config.upper_bound_partition = (1 + epsilon + 0.01) * math.ceil(
            largest_graph_weight / k
        )
        config.kaffpa_perfectly_balance = True
    else:
        load = largest_graph_weight + edge_weights
        config.upper_bound_partition = (1 + epsilon) * math.ceil(load / k)

    if config.adapt_bal:
        config.glob_block_upperbound = (1 + epsilon) * largest_graph_weight / k
        if config.enable_mapping or config.integrated_mapping:
            config.interval_sizes = list(accumulate(config.group_sizes, operator.mul))

    n = graph.number_of_nodes()
    config.graph_already_partitioned = already_partitioned
    config.largest_graph_weight = largest_graph_weight
    config.kway_adaptive_limits_beta = math.log(n) if n > 0 else -math.inf
    config.work_load = largest_graph_weight + edge_weights