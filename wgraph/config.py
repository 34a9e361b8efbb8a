"""Configuration classes for wgraph components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Configuration for the shortest-path search."""

    # Log a warning when searching a graph that holds negative-weight edges
    warn_on_negative_weights: bool = True

    # Emit a DEBUG record for every path popped from the frontier
    trace_expansions: bool = False


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
