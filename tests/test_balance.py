import math

import pytest

from graphpart.balance import configure_balance
from graphpart.config import PartitionConfig
from graphpart.graph import Graph


def _path(weights=(1, 1, 1, 1)):
    return Graph(
        [[1], [0, 2], [1, 3], [2]],
        node_weights=list(weights),
        edge_weights=[[2], [2, 3], [3, 4], [4]],
    )


def test_records_graph_weight_and_state():
    graph = _path((1, 2, 3, 4))
    config = PartitionConfig(k=2)
    configure_balance(config, graph, already_partitioned=True)
    assert config.largest_graph_weight == sum((1, 2, 3, 4))
    assert config.work_load == config.largest_graph_weight
    assert config.graph_already_partitioned is True
    assert config.kway_adaptive_limits_beta == pytest.approx(math.log(4))


def test_perfect_balance_upper_bound():
    config = PartitionConfig(k=2, imbalance=0)
    configure_balance(config, _path())
    assert config.kaffpa_perfectly_balance is True
    assert config.upper_bound_partition == pytest.approx(2.02)


def test_larger_imbalance_gives_larger_bound():
    tight = PartitionConfig(k=2, imbalance=0)
    loose = PartitionConfig(k=2, imbalance=10)
    configure_balance(tight, _path())
    configure_balance(loose, _path())
    assert loose.upper_bound_partition > tight.upper_bound_partition
    assert loose.kaffpa_perfectly_balance is False


def test_balance_edges_adds_weighted_degrees():
    graph = _path()
    total_edge_weight = sum(graph.edge_weights)
    config = PartitionConfig(k=2, imbalance=3, balance_edges=True)
    configure_balance(config, graph)
    assert sum(graph.node_weights) == 4 + total_edge_weight
    assert config.work_load == 4 + total_edge_weight
    assert config.largest_graph_weight == 4


def test_balance_edges_ignored_for_perfect_balance():
    graph = _path()
    config = PartitionConfig(k=2, imbalance=0, balance_edges=True)
    configure_balance(config, graph)
    assert graph.node_weights == [1, 1, 1, 1]
    assert config.work_load == 4


def test_adaptive_balance_with_mapping_builds_interval_sizes():
    config = PartitionConfig(k=2, adapt_bal=True, enable_mapping=True)
    config.group_sizes = [4, 8, 8]
    configure_balance(config, _path())
    assert config.interval_sizes == [4, 32, 256]
    assert config.glob_block_upperbound > 0


def test_adaptive_balance_without_mapping_keeps_intervals():
    config = PartitionConfig(k=2, adapt_bal=True)
    config.group_sizes = [4, 8, 8]
    configure_balance(config, _path())
    assert config.interval_sizes == []