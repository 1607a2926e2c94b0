# graphpart

Building blocks for graph partitioning in pure Python: a weighted graph with a
block assignment per node, tuned configuration presets, partition quality
metrics, subgraph extraction, block weight limits and Fennel-style
label-propagation refinement. It has no dependencies outside the standard
library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `graphpart.graph`

`Graph(adjacency, node_weights, edge_weights, partition, partition_count,
implicit_ghost_nodes, separator_block)` stores a graph as adjacency arrays.
`adjacency` is one list of target nodes per node; edges are numbered in node
order, so the out-edges of a node are a contiguous range. Only `adjacency` is
required: node and edge weights default to 1, the partition to block 0, and
`partition_count` to one more than the largest block index. A `ValueError` is
raised for an edge target that is not a node or for weights and partitions of
the wrong length.

`node_weights`, `edge_weights` (flat, indexed by edge), `partition` and
`implicit_ghost_nodes` are plain lists that may be read and changed in place.
Methods: `number_of_nodes()`, `number_of_edges()`, `nodes()`, `edges()`,
`out_edges(node)`, `edge_target(edge)`, `degree(node)`, `neighbors(node)` and
`has_compressed_ghost_nodes()` (true when ghost node counts were given).

Subgraph extraction returns `ExtractedBlock` records with the new `graph`, a
`mapping` from new to original nodes and the total node `weight`:

- `extract_block(graph, block)`: the subgraph induced by one block.
- `extract_two_blocks(graph)`: a pair of blocks, block 0 on the left and every
  other node on the right; on the right only edges into block 1 are kept.
- `extract_two_blocks_connected(graph, lhs_nodes, rhs_nodes, lhs, rhs)`: the
  listed nodes, left ones given block 0 and right ones block 1, keeping edges
  to nodes of blocks `lhs` and `rhs`.

### `graphpart.config`

`PartitionConfig` is a dataclass holding every setting, with the enums it uses
(`MatchingType`, `EdgeRating`, `RefinementType`, `KwayStopRule`, `StopRule`,
`FennelDynamics`, `NodeOrdering`, and others). `PartitionConfig.copy()` makes
an independent copy. `standard(config)` resets a configuration to the
baseline for its `k`; it keeps `k` and the values derived by
`configure_balance`, and appends the mapping group sizes `4, 8, 8` and
distances `1, 10, 100` to the lists already held.

### `graphpart.presets`

Functions that change a configuration in place: `strong`, `eco`, `fast`,
their node-separator variants `strong_separator`, `eco_separator`,
`fast_separator`, the social-network settings `standardsnw`, `fastsocial`,
`ecosocial`, `strongsocial`, and `integrated_mapping` and `stream_partition`.
Except for `standardsnw` and `integrated_mapping`, each begins from
`standard`. `eco` and the presets built on it raise `ValueError` when `k` is
not positive.

### `graphpart.balance`

`configure_balance(config, graph, already_partitioned)` sets
`upper_bound_partition`, `largest_graph_weight`, `work_load`,
`kway_adaptive_limits_beta` and, with `adapt_bal`, `glob_block_upperbound`
(and `interval_sizes` when mapping is enabled). With `balance_edges` and a
non-zero imbalance it adds each node's weighted degree to its node weight.

### `graphpart.quality_metrics`

Measures of a partition; functions taking `partition_map` use it in place of
`graph.partition` when given:

- cuts: `edge_cut`, `edge_cut_between`, `edge_cut_connected` (penalised when
  blocks are not connected; prints the number of components),
  `edge_cut_full_stream`, `ghost_edge_cut`
- balance: `balance`, `balance_edges`, `edge_balance`, `balance_separator`,
  `balance_full_stream`, `separator_weight`
- communication volume: `max_communication_volume`,
  `min_communication_volume`, `total_communication_volume`
- `boundary_nodes`, `fennel_weight`, `fennel_objective` (truncated to an
  integer) and `objective`, which picks the measure the configuration asks for.

### `graphpart.refinement`

`Refinement` is the abstract interface. `LabelPropagationRefinement` offers
`perform_refinement_fennel(config, graph, boundary)`, which moves nodes of
`graph.partition` toward the neighbouring block that scores best under the
Fennel objective, within `config.stream_total_upperbound`, for
`config.label_iterations_refinement` rounds; its plain `perform_refinement`
does nothing and returns 0. `is_boundary(node, graph)` is true when the node
has a neighbour in its own block. `MixedRefinement` runs the Fennel label
propagation for streamed input (`stream_input`) unless `initial_partitioning`
or `skip_outer_ls` is set. The `boundary` argument is not used.

### `graphpart.misc`

`balance_singletons(config, graph)` moves each isolated node into the
currently lightest block and prints the resulting balance.
`has_kway_partition(config, graph)` tells whether each of the `k` blocks
holds a node.

### `graphpart.random_functions` and `graphpart.timer`

Seeded random helpers (`set_seed`, `next_bool`, `next_int`, `next_double`,
`FastRandBool`), in-place permutations (`circular_permutation`,
`permutate_vector_fast`, `permutate_vector_good`,
`permutate_vector_good_small`, `permutate_pairs_good`, `permutate_entries`)
and the approximations `approx_invsqrt` and `approx_sqrt`. `Timer` measures
elapsed seconds with `restart()` and `elapsed()`.

## Example

    from graphpart.graph import Graph
    from graphpart.config import PartitionConfig
    from graphpart.presets import eco
    from graphpart.balance import configure_balance
    from graphpart import quality_metrics

    # a 4-cycle split into two blocks
    graph = Graph([[1, 3], [0, 2], [1, 3], [2, 0]], partition=[0, 0, 1, 1])

    config = PartitionConfig(k=2)
    eco(config)
    configure_balance(config, graph, False)

    print(quality_metrics.edge_cut(graph))   # 2
    print(quality_metrics.balance(graph))    # 1.0

Call `graphpart.random_functions.set_seed` for reproducible results.

## What it does not do

The package has no command-line program and does not read or write graph
files. It does not compute a partition from scratch: there is no coarsening,
matching or initial partitioning, and refinement is limited to the label
propagation described above. Partitions are supplied by the caller in
`Graph.partition`.