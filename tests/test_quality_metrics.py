import pytest

from graphpart.config import FennelDynamics, PartitionConfig
from graphpart.graph import Graph
from graphpart import quality_metrics as qm


def path_graph(partition, node_weights=None, weights=(3, 7, 5)):
    a, b, c = weights
    return Graph(
        [[1], [0, 2], [1, 3], [2]],
        node_weights=node_weights,
        edge_weights=[[a], [a, b], [b, c], [c]],
        partition=partition,
        partition_count=2,
    )


def test_edge_cut_single_cut_edge():
    g = path_graph([0, 0, 1, 1])
    assert qm.edge_cut(g) == 7
    assert qm.edge_cut_between(g, 0, 1) == 7
    assert qm.edge_cut_between(g, 1, 0) == 7


def test_edge_cut_with_partition_map_matches_graph_partition():
    g = path_graph([0, 0, 0, 0])
    pm = [0, 0, 1, 1]
    assert qm.edge_cut(g, pm) == qm.edge_cut(path_graph(pm))
    assert qm.edge_cut(g) == 0


def test_edge_cut_between_same_block_ignored_for_other_pairs():
    g = path_graph([0, 0, 1, 1])
    assert qm.edge_cut_between(g, 0, 0) == 3 * 2


def test_communication_volume_invariants():
    g = path_graph([0, 0, 1, 1])
    low = qm.min_communication_volume(g)
    high = qm.max_communication_volume(g)
    total = qm.total_communication_volume(g)
    assert low <= high
    assert total == qm.boundary_nodes(g)
    assert high == qm.max_communication_volume(g, g.partition)


def test_boundary_nodes_none_when_single_block():
    g = path_graph([0, 0, 0, 0])
    assert qm.boundary_nodes(g) == 0
    assert qm.total_communication_volume(g) == 0


def test_balance_even_and_uneven():
    assert qm.balance(path_graph([0, 0, 1, 1])) == 1.0
    assert qm.balance(path_graph([0, 0, 0, 1])) == pytest.approx(1.5)


def test_balance_edges_even():
    assert qm.balance_edges(path_graph([0, 0, 1, 1])) == 1.0


def test_edge_balance_all_in_one_block():
    g = path_graph([0, 0, 1, 1])
    assert qm.edge_balance(g, [0] * g.number_of_edges()) == pytest.approx(2.0)
    half = g.number_of_edges() // 2
    assert qm.edge_balance(g, [0] * half + [1] * half) == 1.0


def test_separator_metrics():
    g = Graph(
        [[1], [0, 2], [1]],
        node_weights=[3, 2, 3],
        partition=[0, 2, 1],
        partition_count=3,
        separator_block=2,
    )
    assert qm.separator_weight(g) == 2
    assert qm.balance_separator(g) == pytest.approx(0.75)


def test_balance_full_stream():
    assert qm.balance_full_stream([4, 4]) == 1.0
    assert qm.balance_full_stream([9]) == 1.0


def test_edge_cut_connected_connected_blocks(capsys):
    g = path_graph([0, 0, 1, 1])
    assert qm.edge_cut_connected(g) == qm.edge_cut(g)
    assert "number of connected comp 2" in capsys.readouterr().out


def test_edge_cut_connected_penalises_split_block(capsys):
    g = path_graph([0, 0, 0, 0])
    pm = [0, 1, 1, 0]
    expected = qm.edge_cut(g, pm) + sum(g.edge_weights) * 3
    assert qm.edge_cut_connected(g, pm) == expected
    assert "number of connected comp 3" in capsys.readouterr().out


def test_objective_dispatch(capsys):
    g = path_graph([0, 0, 0, 0])
    pm = [0, 1, 1, 0]
    config = PartitionConfig()
    assert qm.objective(config, g, pm) == qm.edge_cut(g, pm)
    config.mh_penalty_for_unconnected = True
    assert qm.objective(config, g, pm) == qm.edge_cut_connected(g, pm)
    config.mh_optimize_communication_volume = True
    assert qm.objective(config, g, pm) == qm.max_communication_volume(g, pm)


@pytest.mark.parametrize(
    "dynamics, expected",
    [
        (FennelDynamics.ORIGINAL, 1.0),
        (FennelDynamics.DOUBLE, 2.0),
        (FennelDynamics.EDGE_CUT, 0.0),
    ],
)
def test_fennel_weight_fixed(dynamics, expected):
    config = PartitionConfig(fennel_dynamics=dynamics)
    assert qm.fennel_weight(config) == expected


def test_fennel_weight_dynamic_thresholds():
    config = PartitionConfig(
        fennel_dynamics=FennelDynamics.MID_CONSTANT,
        remaining_stream_nodes=1,
        total_stream_edges=1,
    )
    assert qm.fennel_weight(config) == 0.5
    config.remaining_stream_nodes = 2
    assert qm.fennel_weight(config) == 2.0
    config.fennel_dynamics = FennelDynamics.MID_LINEAR
    assert qm.fennel_weight(config) == 2.0
    config.fennel_dynamics = FennelDynamics.QUADRATIC
    config.remaining_stream_nodes = 1
    assert qm.fennel_weight(config) == 2.0


def test_fennel_objective_edge_cut_dynamics_counts_interior_edges():
    g = path_graph([0, 0, 0, 0])
    config = PartitionConfig(fennel_dynamics=FennelDynamics.EDGE_CUT)
    result = qm.fennel_objective(config, g, 1.5, 1.0)
    assert result == -sum(g.edge_weights) // 2


def test_fennel_objective_partition_map_matches_graph():
    g = path_graph([0, 0, 1, 1])
    config = PartitionConfig()
    explicit = qm.fennel_objective(config, path_graph([1, 1, 1, 1]), 1.5, 1.0, [0, 0, 1, 1])
    assert qm.fennel_objective(config, g, 1.5, 1.0) == explicit


def test_ghost_edge_cut():
    g = path_graph([0, 0, 1, 1])
    config = PartitionConfig()
    config.ghostkey_to_node = [0, 3]
    config.ghostkey_to_edges = [[(1, 4), (2, 9)], [(2, 6)]]
    assert qm.ghost_edge_cut(config, g) == 9


def test_edge_cut_full_stream_stops_at_stream_nodes():
    g = path_graph([0, 1, 1, 1])
    config = PartitionConfig(nmb_nodes=1)
    rows = [[5, 2], [1, 8], [4, 4], [6, 6]]
    assert qm.edge_cut_full_stream(config, g, rows) == 2
    config.nmb_nodes = 0
    assert qm.edge_cut_full_stream(config, g, rows) == 0


def test_balance_raises_on_weightless_graph():
    g = path_graph([0, 0, 1, 1], node_weights=[0, 0, 0, 0])
    with pytest.raises(ZeroDivisionError):
        qm.balance(g)