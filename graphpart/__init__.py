"""Graph partitioning building blocks: graphs, presets, metrics, balance and refinement."""

__version__ = "0.1.0"
__all__ = [
    "balance",
    "config",
    "graph",
    "misc",
    "presets",
    "quality_metrics",
    "random_functions",
    "refinement",
    "timer",
]