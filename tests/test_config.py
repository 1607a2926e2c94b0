import pytest

from graphpart.config import (
    UNDEFINED_LONGNODE,
    EdgeRating,
    FennelDynamics,
    MatchingType,
    PartitionConfig,
    standard,
)
from graphpart.random_functions import PermutationQuality


def test_standard_resets_tuned_settings():
    config = PartitionConfig(k=4)
    config.seed = 7
    config.imbalance = 10
    config.matching_type = MatchingType.GPA
    config.fennel_dynamics = FennelDynamics.LINEAR
    standard(config)
    assert config.seed == 0
    assert config.imbalance == 3
    assert config.epsilon == 3
    assert config.matching_type is MatchingType.RANDOM
    assert config.edge_rating is EdgeRating.WEIGHT
    assert config.fennel_dynamics is FennelDynamics.ORIGINAL
    assert config.permutation_quality is PermutationQuality.FAST
    assert config.permutation_during_refinement is PermutationQuality.GOOD


def test_standard_keeps_k_and_balance_state():
    config = PartitionConfig(k=16, upper_bound_partition=120.0, skip_delta_gains=True)
    standard(config)
    assert config.k == 16
    assert config.upper_bound_partition == 120.0
    assert config.skip_delta_gains is True


@pytest.mark.parametrize(
    "k, fm, ml, aug",
    [(2, 30, 6, 15), (4, 30, 6, 15), (5, 25, 5, 15), (8, 25, 5, 15), (9, 25, 5, 7)],
)
def test_standard_k_dependent_limits(k, fm, ml, aug):
    config = PartitionConfig(k=k)
    standard(config)
    assert config.bipartition_post_fm_limits == fm
    assert config.bipartition_post_ml_limits == ml
    assert config.kaba_internal_no_aug_steps_aug == aug


def test_standard_upper_global_nodes_follow_k():
    config = PartitionConfig(k=32)
    standard(config)
    assert config.upper_global_node == 32
    assert config.upper_global_node_conv == 32
    assert config.lower_global_node == 1


def test_standard_derived_stream_values():
    config = PartitionConfig()
    config.fennel_alpha_gamma = 0.0
    config.stream_global_epsilon = 0.5
    standard(config)
    assert config.fennel_alpha_gamma == pytest.approx(config.fennel_alpha * config.fennel_gamma)
    assert config.stream_global_epsilon == pytest.approx(config.imbalance / 100.0)
    assert config.remaining_stream_nodes == UNDEFINED_LONGNODE
    assert config.stream_buffer_len == 32768


def test_standard_appends_mapping_hierarchy():
    config = PartitionConfig()
    standard(config)
    assert config.group_sizes == [4, 8, 8]
    assert config.distances == [1, 10, 100]
    standard(config)
    assert config.group_sizes == [4, 8, 8, 4, 8, 8]
    assert config.distances == [1, 10, 100, 1, 10, 100]


def test_copy_is_equal_and_independent():
    config = PartitionConfig(k=8)
    standard(config)
    config.target_weights = [10, 20]
    duplicate = config.copy()
    assert duplicate == config
    duplicate.group_sizes.append(2)
    duplicate.target_weights[0] = 99
    duplicate.seed = 5
    assert config.group_sizes == [4, 8, 8]
    assert config.target_weights == [10, 20]
    assert config.seed == 0


def test_copy_shares_handles():
    config = PartitionConfig()
    handle = {"ghosts": [1, 2]}
    config.ghostkey_to_edges = handle
    assert config.copy().ghostkey_to_edges is handle