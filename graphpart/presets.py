"""Named partitioner presets built on top of the standard configuration."""

from __future__ import annotations

import math
from typing import Any

from graphpart.config import (
    EdgeRating,
    FennelDynamics,
    GhostNodesProcedure,
    InitialPartitioningType,
    KwayStopRule,
    MatchingType,
    NodeOrdering,
    PartitionConfig,
    RefinementSchedulingAlgorithm,
    RefinementType,
    StopRule,
    standard,
)
from graphpart.random_functions import PermutationQuality


def _apply(config: PartitionConfig, **values: Any) -> None:
    for name, value in values.items():
        if not hasattr(config, name):
            raise AttributeError(f"unknown setting {name!r}")
        setattr(config, name, value)


def _log2_of_k(config: PartitionConfig) -> float:
    if config.k <= 0:
        raise ValueError(f"number of blocks must be positive, got {config.k}")
    return math.log2(config.k)


def strong(config: PartitionConfig) -> None:
    """Reset to the standard settings, then tune for the best cut quality."""
    standard(config)
    _apply(
        config,
        matching_type=MatchingType.GPA,
        permutation_quality=PermutationQuality.GOOD,
        permutation_during_refinement=PermutationQuality.GOOD,
        edge_rating_tiebreaking=True,
        fm_search_limit=5,
        bank_account_factor=3,
        edge_rating=EdgeRating.EXPANSIONSTAR2,
        refinement_scheduling_algorithm=RefinementSchedulingAlgorithm.ACTIVE_BLOCKS_REF_KWAY,
        refinement_type=RefinementType.FM_FLOW,
        global_cycle_iterations=2,
        flow_region_factor=8,
        corner_refinement_enabled=True,
        kway_stop_rule=KwayStopRule.ADAPTIVE,
        kway_adaptive_limits_alpha=10,
        kway_rounds=10,
        rate_first_level_inner_outer=True,
        use_wcycles=False,
        no_new_initial_partitioning=True,
        use_fullmultigrid=True,
        most_balanced_minimum_cuts=True,
        local_multitry_fm_alpha=10,
        local_multitry_rounds=10,
        mh_initial_population_fraction=10,
        mh_flip_coin=1,
        epsilon=3,
        imbalance=3,
        initial_partitioning_type=InitialPartitioningType.RECPARTITION,
        bipartition_tries=4,
        minipreps=4,
        initial_partitioning_repetitions=64,
        strong=True,
    )


def eco(config: PartitionConfig) -> None:
    """Reset to the standard settings, then balance quality against speed."""
    standard(config)
    log_k = _log2_of_k(config)
    _apply(
        config,
        eco=True,
        aggressive_random_levels=max(2, int(7 - log_k)),
        kway_rounds=min(5, int(log_k)),
        matching_type=MatchingType.RANDOM_GPA,
        permutation_quality=PermutationQuality.NONE,
        permutation_during_refinement=PermutationQuality.GOOD,
        edge_rating=EdgeRating.EXPANSIONSTAR2,
        fm_search_limit=1,
        refinement_type=RefinementType.FM_FLOW,
        flow_region_factor=2,
        corner_refinement_enabled=True,
        kway_stop_rule=KwayStopRule.SIMPLE,
        kway_fm_search_limit=1,
        mh_initial_population_fraction=50,
        mh_flip_coin=1,
        initial_partitioning_type=InitialPartitioningType.RECPARTITION,
        bipartition_tries=4,
        minipreps=4,
        initial_partitioning_repetitions=16,
    )


def fast(config: PartitionConfig) -> None:
    """Reset to the standard settings, then tune for speed."""
    standard(config)
    config.fast = True
    if config.k > 8:
        _apply(
            config,
            quotient_graph_refinement_disabled=True,
            kway_fm_search_limit=0,
            kway_stop_rule=KwayStopRule.SIMPLE,
            corner_refinement_enabled=True,
        )
    else:
        config.corner_refinement_enabled = False
    _apply(
        config,
        permutation_quality=PermutationQuality.FAST,
        permutation_during_refinement=PermutationQuality.NONE,
        matching_type=MatchingType.RANDOM_GPA,
        aggressive_random_levels=4,
        refinement_scheduling_algorithm=RefinementSchedulingAlgorithm.FAST,
        edge_rating=EdgeRating.EXPANSIONSTAR2,
        fm_search_limit=0,
        bank_account_factor=1,
        initial_partitioning_type=InitialPartitioningType.RECPARTITION,
        bipartition_tries=4,
        minipreps=1,
        initial_partitioning_repetitions=0,
    )


def strong_separator(config: PartitionConfig) -> None:
    """The strong preset adapted to computing node separators."""
    strong(config)
    _apply(
        config,
        global_cycle_iterations=3,
        most_balanced_minimum_cuts_node_sep=False,
        mode_node_separators=True,
        use_fullmultigrid=False,
        use_wcycles=False,
        matching_type=MatchingType.GPA,
        region_factor_node_separators=1,
    )


def eco_separator(config: PartitionConfig) -> None:
    """The eco preset adapted to computing node separators."""
    eco(config)
    _apply(
        config,
        mode_node_separators=True,
        use_fullmultigrid=False,
        use_wcycles=False,
        matching_type=MatchingType.GPA,
        sep_loc_fm_disabled=True,
        sep_flows_disabled=False,
        sep_fm_disabled=False,
        sep_greedy_disabled=True,
        region_factor_node_separators=0.5,
        global_cycle_iterations=2,
    )


def fast_separator(config: PartitionConfig) -> None:
    """The fast preset adapted to computing node separators."""
    fast(config)
    _apply(
        config,
        mode_node_separators=True,
        use_fullmultigrid=False,
        use_wcycles=False,
        matching_type=MatchingType.GPA,
        sep_loc_fm_disabled=True,
        sep_flows_disabled=True,
        sep_fm_disabled=False,
        sep_greedy_disabled=True,
        global_cycle_iterations=1,
    )


def _clusterings_for(k: int) -> int:
    if 2 <= k <= 3:
        return 18
    if 4 <= k <= 7:
        return 17
    if 8 <= k <= 15:
        return 15
    if 16 <= k <= 31:
        return 7
    return 3


def standardsnw(config: PartitionConfig) -> None:
    """Switch coarsening to cluster contraction, as suited to social networks."""
    _apply(
        config,
        matching_type=MatchingType.CLUSTER_COARSENING,
        stop_rule=StopRule.MULTIPLE_K,
        num_vert_stop_factor=5000,
        number_of_clusterings=_clusterings_for(config.k),
        balance_factor=0.00 if config.k <= 8 else 0.016,
    )


def fastsocial(config: PartitionConfig) -> None:
    """Fast preset for social networks: eco plus label propagation refinement."""
    eco(config)
    standardsnw(config)
    _apply(
        config,
        label_propagation_refinement=True,
        cluster_coarsening_during_ip=True,
        balance_factor=0,
    )


def ecosocial(config: PartitionConfig) -> None:
    """Eco preset for social networks."""
    eco(config)
    standardsnw(config)
    _apply(
        config,
        label_propagation_refinement=False,
        global_cycle_iterations=3,
        use_wcycles=False,
        no_new_initial_partitioning=True,
        balance_factor=0.016,
        cluster_coarsening_during_ip=True,
    )


def strongsocial(config: PartitionConfig) -> None:
    """Strong preset for social networks, with ensemble clusterings."""
    strong(config)
    standardsnw(config)
    _apply(
        config,
        label_propagation_refinement=False,
        cluster_coarsening_during_ip=True,
        ensemble_clusterings=True,
    )


def integrated_mapping(config: PartitionConfig) -> None:
    """Adjust an existing configuration for integrated process mapping."""
    _apply(
        config,
        fm_search_limit=0,
        corner_refinement_enabled=False,
        flow_region_factor=0,
        local_multitry_rounds=10,
        skip_delta_gains=False,
    )


def stream_partition(config: PartitionConfig) -> None:
    """The fastsocial preset set up for streaming input with Fennel."""
    fastsocial(config)
    _apply(
        config,
        stream_input=True,
        stream_initial_bisections=True,
        fennel_dynamics=FennelDynamics.ORIGINAL,
        batch_inbalance=20,
        initial_partitioning_type=InitialPartitioningType.FENNEL,
        label_iterations=5,
        label_iterations_refinement=5,
        use_balance_singletons=False,
        node_ordering=NodeOrdering.NATURAL,
        stop_rule=StopRule.MULTIBFS,
        ghost_nodes_procedure=GhostNodesProcedure.CONTRACT_ALL,
        ghost_nodes_threshold=0,
        use_fennel_objective=True,
        adapt_bal=True,
        xxx=4,
        restream_vcycle=True,
    )