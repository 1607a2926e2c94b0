"""Refinement of partitions: a common interface, label propagation and the mixed driver."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any

from graphpart.config import FennelDynamics, PartitionConfig
from graphpart.graph import Graph
from graphpart.quality_metrics import fennel_weight
from graphpart.random_functions import FastRandBool, approx_sqrt


class Refinement(ABC):
    """Improves the partition stored in a graph, returning the gain achieved."""

    @abstractmethod
    def perform_refinement(
        self, config: PartitionConfig, graph: Graph, boundary: Any = None
    ) -> int:
        """Refine ``graph.partition`` in place."""


class LabelPropagationRefinement(Refinement):
    """Moves nodes to the neighbouring block that scores best."""

    def perform_refinement(
        self, config: PartitionConfig, graph: Graph, boundary: Any = None
    ) -> int:
        return 0

    def perform_refinement_fennel(
        self, config: PartitionConfig, graph: Graph, boundary: Any = None
    ) -> int:
        """Label propagation under the Fennel objective, respecting the stream bound.

        Runs ``config.label_iterations_refinement`` rounds; nodes whose label
        changes queue their neighbours for the next round.  The trailing
        ``config.quotient_nodes`` nodes are never moved.
        """
        coin = FastRandBool()
        k = config.k
        hash_map = [0] * k
        cluster_sizes = [0] * k
        cluster_ghosts = [0] * k
        partition = graph.partition
        n = graph.number_of_nodes()

        queue: deque[int] = deque()
        for node in graph.nodes():
            cluster_sizes[partition[node]] += graph.node_weights[node]
            cluster_ghosts[partition[node]] += graph.implicit_ghost_nodes[node]
            queue.append(node)
        in_queue = [False] * n
        next_queue: deque[int] = deque()
        in_next_queue = [False] * n

        weight = fennel_weight(config)
        if (
            config.remaining_stream_nodes == 0
            and config.fennel_dynamics is not FennelDynamics.ORIGINAL
        ):
            weight = 0.0

        alpha_gamma = config.fennel_alpha_gamma
        upper = config.stream_total_upperbound
        first_fixed = n - config.quotient_nodes

        for _ in range(config.label_iterations_refinement):
            while queue:
                node = queue.popleft()
                in_queue[node] = False
                if node >= first_fixed:
                    continue

                for edge in graph.out_edges(node):
                    hash_map[partition[graph.edge_target(edge)]] += graph.edge_weights[edge]

                node_weight = graph.node_weights[node]
                node_ghosts = graph.implicit_ghost_nodes[node]
                my_block = partition[node]
                max_block = my_block
                max_value = hash_map[my_block] - weight * (
                    node_weight
                    * alpha_gamma
                    * approx_sqrt(cluster_sizes[my_block] - node_weight)
                )
                hash_map[my_block] = 0
                my_load = cluster_sizes[my_block] - cluster_ghosts[my_block]

                for edge in graph.out_edges(node):
                    cur_block = partition[graph.edge_target(edge)]
                    if hash_map[cur_block] == 0:
                        continue
                    own = node_weight if cur_block == my_block else 0
                    cur_value = hash_map[cur_block] - weight * (
                        node_weight
                        * alpha_gamma
                        * approx_sqrt(cluster_sizes[cur_block] - own)
                    )
                    new_load = (
                        cluster_sizes[cur_block]
                        - cluster_ghosts[cur_block]
                        + node_weight
                        - node_ghosts
                    )
                    better = cur_value > max_value or (
                        cur_value == max_value and coin.next_bool()
                    )
                    fits = new_load <= upper or cur_block == my_block or new_load <= my_load
                    if better and fits:
                        max_value = cur_value
                        max_block = cur_block
                    hash_map[cur_block] = 0

                cluster_sizes[my_block] -= node_weight
                cluster_ghosts[my_block] -= node_ghosts
                cluster_sizes[max_block] += node_weight
                cluster_ghosts[max_block] += node_ghosts
                partition[node] = max_block

                if max_block != my_block:
                    for target in graph.neighbors(node):
                        if not in_next_queue[target]:
                            next_queue.append(target)
                            in_next_queue[target] = True

            queue, next_queue = next_queue, queue
            in_queue, in_next_queue = in_next_queue, in_queue

        return 0

    def is_boundary(self, node: int, graph: Graph) -> bool:
        """True when ``node`` has a neighbour in its own block."""
        block = graph.partition[node]
        return any(graph.partition[target] == block for target in graph.neighbors(node))


class MixedRefinement(Refinement):
    """Runs Fennel label propagation for streamed input outside initial partitioning."""

    def perform_refinement(
        self, config: PartitionConfig, graph: Graph, boundary: Any = None
    ) -> int:
        improvement = 0
        if not config.initial_partitioning and not config.skip_outer_ls:
            if config.stream_input:
                improvement += int(
                    LabelPropagationRefinement().perform_refinement_fennel(
                        config, graph, boundary
                    )
                )
        return improvement