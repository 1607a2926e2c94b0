"""Partitioner settings: option enums, the configuration record and its defaults."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field, fields
from enum import Enum, auto
from typing import Any

from graphpart.random_functions import PermutationQuality

# Sentinels for stream sizes that are not known yet.
UNDEFINED_LONGNODE = (1 << 64) - 1
UNDEFINED_LONGEDGE = (1 << 64) - 1

_INT_MAX = (1 << 31) - 1


class MatchingType(Enum):
    RANDOM = auto()
    GPA = auto()
    RANDOM_GPA = auto()
    CLUSTER_COARSENING = auto()


class EdgeRating(Enum):
    WEIGHT = auto()
    EXPANSIONSTAR2 = auto()


class RefinementSchedulingAlgorithm(Enum):
    FAST = auto()
    ACTIVE_BLOCKS = auto()
    ACTIVE_BLOCKS_REF_KWAY = auto()


class RefinementType(Enum):
    FM = auto()
    FM_FLOW = auto()


class StopRule(Enum):
    SIMPLE = auto()
    MULTIPLE_K = auto()
    MULTIBFS = auto()


class KwayStopRule(Enum):
    SIMPLE = auto()
    ADAPTIVE = auto()


class InitialPartitioningType(Enum):
    RECPARTITION = auto()
    FENNEL = auto()


class BipartitionAlgorithm(Enum):
    BFS = auto()


class CycleRefinementAlgorithm(Enum):
    ULTRA_MODEL = auto()


class LsearchPolicy(Enum):
    NOCOIN_RNDTIE = auto()


class NodeOrdering(Enum):
    DEGREE = auto()
    NATURAL = auto()


class SeparatorEdgeRating(Enum):
    MULTX = auto()


class OnePassAlgorithm(Enum):
    FENNEL = auto()


class FennelDynamics(Enum):
    ORIGINAL = auto()
    DOUBLE = auto()
    LINEAR = auto()
    MID_LINEAR = auto()
    QUADRATIC = auto()
    MID_QUADRATIC = auto()
    MID_CONSTANT = auto()
    EDGE_CUT = auto()


class FennelBatchOrder(Enum):
    UNCHANGED = auto()


class GhostNodesProcedure(Enum):
    CONTRACT_ALL = auto()


class GraphTranslation(Enum):
    EDGE_STREAM_TO_METIS = auto()


class LsNeighborhood(Enum):
    COMMUNICATIONGRAPH = auto()


class ConstructionAlgorithm(Enum):
    FASTHIERARCHY_TOPDOWN = auto()


class DistanceConstructionAlgorithm(Enum):
    HIERARCHY = auto()


class MappingPreconfiguration(Enum):
    ECO = auto()


@dataclass
class PartitionConfig:
    """All partitioner settings.

    Field defaults are the standard values for ``k = 2``; call :func:`standard`
    to reset a configuration and apply the values that depend on ``k``.
    """

    k: int = 2
    upper_bound_partition: float = 0.0
    graph_already_partitioned: bool = False
    largest_graph_weight: int = 0
    kway_adaptive_limits_beta: float = 0.0
    work_load: int = 0
    skip_delta_gains: bool = False
    interval_sizes: list[int] = field(default_factory=list)
    group_sizes: list[int] = field(default_factory=list)
    distances: list[int] = field(default_factory=list)
    target_weights: list[int] = field(default_factory=list)

    filename_output: str = ""
    seed: int = 0
    fast: bool = False
    mode_node_separators: bool = False
    eco: bool = False
    strong: bool = False
    first_level_random_matching: bool = False
    initial_partitioning_repetitions: int = 5
    edge_rating_tiebreaking: bool = False
    edge_rating: EdgeRating = EdgeRating.WEIGHT
    matching_type: MatchingType = MatchingType.RANDOM
    permutation_quality: PermutationQuality = PermutationQuality.FAST
    initial_partitioning: bool = False
    initial_partitioning_type: InitialPartitioningType = InitialPartitioningType.RECPARTITION
    bipartition_tries: int = 9
    minipreps: int = 10
    enable_omp: bool = False
    combine: bool = False
    epsilon: float = 3
    imbalance: float = 3
    buffoon: bool = False
    balance_edges: bool = False

    time_limit: float = 0.0
    mh_pool_size: int = 5
    mh_plain_repetitions: bool = False
    no_unsuc_reps: int = 10
    local_partitioning_repetitions: int = 1
    mh_disable_nc_combine: bool = False
    mh_disable_cross_combine: bool = False
    mh_disable_combine: bool = False
    mh_enable_quickstart: bool = False
    mh_disable_diversify_islands: bool = False
    mh_diversify: bool = True
    mh_diversify_best: bool = False
    mh_cross_combine_original_k: bool = False
    mh_enable_tournament_selection: bool = True
    mh_initial_population_fraction: int = 10
    mh_flip_coin: int = 1
    mh_print_log: bool = False
    mh_penalty_for_unconnected: bool = False
    mh_no_mh: bool = False
    mh_optimize_communication_volume: bool = False
    use_bucket_queues: bool = False
    walshaw_mh_repetitions: int = 50
    scaling_factor: int = 1
    scale_back: bool = False
    initial_partition_optimize_fm_limits: int = 20
    initial_partition_optimize_multitry_fm_alpha: int = 20
    initial_partition_optimize_multitry_rounds: int = 100
    suppress_partitioner_output: bool = False
    bipartition_post_fm_limits: int = 30
    bipartition_post_ml_limits: int = 6

    disable_max_vertex_weight_constraint: bool = False
    permutation_during_refinement: PermutationQuality = PermutationQuality.GOOD
    fm_search_limit: int = 5
    bank_account_factor: float = 1.5
    refinement_scheduling_algorithm: RefinementSchedulingAlgorithm = (
        RefinementSchedulingAlgorithm.ACTIVE_BLOCKS
    )
    rate_first_level_inner_outer: bool = False
    match_islands: bool = False
    refinement_type: RefinementType = RefinementType.FM
    flow_region_factor: float = 4.0
    aggressive_random_levels: int = 3
    refined_bubbling: bool = True
    corner_refinement_enabled: bool = False
    bubbling_iterations: int = 1
    kway_rounds: int = 1
    quotient_graph_refinement_disabled: bool = False
    kway_fm_search_limit: int = 3
    global_cycle_iterations: int = 1
    softrebalance: bool = False
    rebalance: bool = False
    use_wcycles: bool = False
    stop_rule: StopRule = StopRule.SIMPLE
    num_vert_stop_factor: int = 20
    level_split: int = 2
    no_new_initial_partitioning: bool = True
    omit_given_partitioning: bool = False
    use_fullmultigrid: bool = False
    kway_stop_rule: KwayStopRule = KwayStopRule.SIMPLE
    kway_adaptive_limits_alpha: float = 1.0
    max_flow_iterations: int = 10
    no_change_convergence: bool = False
    no_change_convergence_map: bool = False
    compute_vertex_separator: bool = False
    toposort_iterations: int = 4
    initial_partition_optimize: bool = False
    most_balanced_minimum_cuts: bool = False
    most_balanced_minimum_cuts_node_sep: bool = False
    gpa_grow_paths_between_blocks: bool = True
    bipartition_algorithm: BipartitionAlgorithm = BipartitionAlgorithm.BFS
    local_multitry_rounds: int = 1
    local_multitry_fm_alpha: int = 10
    only_first_level: bool = False
    use_balance_singletons: bool = True
    disable_hard_rebalance: bool = False
    amg_iterations: int = 5
    kaffpa_perfectly_balance: bool = False
    kaffpa_e: bool = False

    remove_negative_cycles: bool = False
    cycle_refinement_algorithm: CycleRefinementAlgorithm = CycleRefinementAlgorithm.ULTRA_MODEL
    kaba_e_internal_bal: float = 0.01
    kaba_packing_iterations: int = 20
    kaba_flip_packings: bool = False
    kaba_lsearch_p: LsearchPolicy = LsearchPolicy.NOCOIN_RNDTIE
    kaffpa_perfectly_balanced_refinement: bool = False
    kaba_enable_zero_weight_cycles: bool = True
    mh_enable_gal_combine: bool = False
    mh_easy_construction: bool = False
    faster_ns: bool = False
    max_t: int = 100
    max_iter: int = 500000
    kaba_internal_no_aug_steps_aug: int = 15
    kaba_unsucc_iterations: int = 6
    initial_bipartitioning: bool = False
    kabap_e: bool = False

    cluster_coarsening_factor: int = 18
    ensemble_clusterings: bool = False
    label_iterations: int = 10
    label_iterations_refinement: int = 25
    number_of_clusterings: int = 1
    label_propagation_refinement: bool = False
    balance_factor: float = 0.0
    cluster_coarsening_during_ip: bool = False
    set_upperbound: bool = True
    repetitions: int = 1
    node_ordering: NodeOrdering = NodeOrdering.DEGREE

    max_flow_improv_steps: int = 5
    max_initial_ns_tries: int = 25
    region_factor_node_separators: float = 0.5
    sep_flows_disabled: bool = False
    sep_fm_disabled: bool = False
    sep_greedy_disabled: bool = True
    sep_fm_unsucc_steps: int = 2000
    sep_num_fm_reps: int = 200
    sep_loc_fm_disabled: bool = False
    sep_loc_fm_no_snodes: int = 20
    sep_loc_fm_unsucc_steps: int = 50
    sep_num_loc_fm_reps: int = 25
    sep_num_vert_stop: int = 8000
    sep_full_boundary_ip: bool = False
    sep_edge_rating_during_ip: SeparatorEdgeRating = SeparatorEdgeRating.MULTX

    integrated_mapping: bool = False
    multisection: bool = False
    qap_label_propagation_refinement: bool = False
    qap_blabel_propagation_refinement: bool = False
    qap_alabel_propagation_refinement: bool = False
    qap_multitry_kway_fm: bool = False
    qap_bmultitry_kway_fm: bool = False
    qap_kway_fm: bool = False
    qap_bkway_fm: bool = False
    qap_quotient_ref: bool = False
    qap_bquotient_ref: bool = False
    qap_0quotient_ref: bool = False
    bipartition_gp_local_search: bool = True
    skip_map_ls: bool = False
    suppress_output: bool = False
    full_matrix: bool = False
    label_iterations_refinement_map: int = 25

    use_delta_gains: bool = False
    quotient_more_mem: bool = False
    ref_layer: Any = None
    use_bin_id: bool = False
    use_compact_bin_id: bool = False

    adapt_bal: bool = False
    glob_block_upperbound: float = 0.0

    stream_input: bool = False
    stream_buffer_len: int = 32768
    remaining_stream_nodes: int = UNDEFINED_LONGNODE
    remaining_stream_edges: int = UNDEFINED_LONGEDGE
    remaining_stream_ew: int = 0
    total_stream_nodeweight: int = 0
    total_stream_nodecounter: int = 0
    stream_assigned_nodes: int = 0
    stream_n_nodes: int = 0
    stream_in: Any = None
    lower_global_node: int = 1
    upper_global_node: int = 2
    stream_nodes_assign: Any = None
    stream_blocks_weight: Any = None
    nmb_nodes: int = 0
    degree_node_block: Any = None
    one_pass_algorithm: OnePassAlgorithm = OnePassAlgorithm.FENNEL
    stream_total_upperbound: float = 0
    fennel_gamma: float = 1.5
    fennel_alpha: float = 1.0
    fennel_alpha_gamma: float = 1.5
    use_fennel_objective: bool = False
    add_blocks_weight: Any = None
    fennel_dynamics: FennelDynamics = FennelDynamics.ORIGINAL
    ram_stream: bool = False
    fennel_contraction: bool = False
    fennel_batch_order: FennelBatchOrder = FennelBatchOrder.UNCHANGED
    quotient_nodes: int = 0
    lhs_nodes: int = 0
    stream_initial_bisections: bool = False
    n_batches: int = 1
    curr_batch: int = 1
    stream_global_epsilon: float = 0.03
    stream_output_progress: bool = False
    stream_allow_ghostnodes: bool = False
    ghostglobal_to_ghostkey: Any = None
    ghostkey_to_node: Any = None
    ghostkey_to_edges: Any = None
    stream_whole_adjacencies: bool = False
    ghost_nodes: int = 0
    ghost_nodes_procedure: GhostNodesProcedure = GhostNodesProcedure.CONTRACT_ALL
    ghost_nodes_threshold: int = 0
    num_streams_passes: int = 1
    restream_number: int = 0
    restream_vcycle: bool = False
    batch_inbalance: int = 20
    skip_outer_ls: bool = False
    use_fennel_edgecut_objectives: bool = False
    xxx: int = 4
    double_non_ghost_edges: bool = True
    edge_block_nodes: Any = None

    total_nodes_loaded: int = 0
    local_to_global_map: Any = None
    node_in_current_block: Any = None
    max_block_weight: int = 0
    first_phase_buffer_len: int = 1
    second_phase_buffer_len: int = 32768
    max_pq_size: int = 1000000
    bq_disc_factor: int = 100

    remaining_stream_nodes_og: int = UNDEFINED_LONGNODE
    remaining_stream_graph_nodes: int = UNDEFINED_LONGNODE
    total_nodes: int = UNDEFINED_LONGNODE
    total_edges: int = UNDEFINED_LONGEDGE
    fennel_edges: int = 0
    lower_global_node_conv: int = 1
    upper_global_node_conv: int = 2
    incremental_edge_id: int = 0
    prev_batch_edge_id: int = 0
    start_pos: int = 24
    total_stream_edges: int = 0
    benchmark: bool = False
    dynamic_alpha: bool = False
    batch_alpha: bool = True
    minimal_mode: bool = True
    light_evaluator: bool = False
    convert_direct: bool = False
    async_mode: bool = False
    write_log: bool = False
    use_queue: bool = False
    last_edge_count: int = 0
    back_node_count: int = 0
    forward_node_count: int = 0
    evaluate_mode: bool = False
    include_weights: bool = False
    parallel_nodes: int = 1
    num_split_edges: int = -1
    past_subset_size: int = -1
    tau: int = 0
    nodes_on_edge_conv: Any = None
    blocks_on_node: Any = None
    blocks_on_node_minimal: Any = None
    reps: int = 1
    edge_partition: bool = False
    quotient_edges_count: int = 0

    read_graph_time: float = 0.0
    finding_past_assignments_time: float = 0.0
    assign_edge_id_time: float = 0.0
    graph_model_time: float = 0.0
    initial_partition_time: float = 0.0
    stream_output_time: float = 0.0

    initial_part_multi_bfs: bool = False
    multibfs_tries: int = 1
    initial_part_fennel_tries: int = 1

    relabel_nodes: bool = True
    graph_translation_specs: GraphTranslation = GraphTranslation.EDGE_STREAM_TO_METIS
    input_header_absent: bool = False

    enable_mapping: bool = False
    ls_neighborhood: LsNeighborhood = LsNeighborhood.COMMUNICATIONGRAPH
    communication_neighborhood_dist: int = 10
    construction_algorithm: ConstructionAlgorithm = ConstructionAlgorithm.FASTHIERARCHY_TOPDOWN
    distance_construction_algorithm: DistanceConstructionAlgorithm = (
        DistanceConstructionAlgorithm.HIERARCHY
    )
    search_space_s: int = 64
    preconfiguration_mapping: MappingPreconfiguration = MappingPreconfiguration.ECO
    max_recursion_levels_construction: int = _INT_MAX

    def copy(self) -> PartitionConfig:
        """Return an independent copy; list settings are copied, handles are shared."""
        duplicate = _copy.copy(self)
        for name in _LIST_FIELDS:
            setattr(duplicate, name, list(getattr(self, name)))
        return duplicate


_LIST_FIELDS = ("interval_sizes", "group_sizes", "distances", "target_weights")

# Settings that standard() leaves as they are.
_KEPT_BY_STANDARD = frozenset(
    {
        "k",
        "upper_bound_partition",
        "graph_already_partitioned",
        "largest_graph_weight",
        "kway_adaptive_limits_beta",
        "work_load",
        "skip_delta_gains",
        *_LIST_FIELDS,
    }
)


def standard(config: PartitionConfig) -> None:
    """Reset ``config`` to the standard settings for its number of blocks ``k``.

    The group sizes and distances of the mapping hierarchy are appended to
    whatever lists the configuration already holds.
    """
    defaults = PartitionConfig(k=config.k)
    for f in fields(PartitionConfig):
        if f.name not in _KEPT_BY_STANDARD:
            setattr(config, f.name, getattr(defaults, f.name))

    k = config.k
    if k <= 4:
        config.bipartition_post_fm_limits = 30
        config.bipartition_post_ml_limits = 6
    else:
        config.bipartition_post_fm_limits = 25
        config.bipartition_post_ml_limits = 5

    config.kaba_internal_no_aug_steps_aug = 15 if k <= 8 else 7

    config.upper_global_node = k
    config.upper_global_node_conv = k
    config.fennel_alpha_gamma = config.fennel_alpha * config.fennel_gamma
    config.stream_global_epsilon = config.imbalance / 100.0

    config.group_sizes.extend((4, 8, 8))
    config.distances.extend((1, 10, 100))