"""Path primitives for representing routes found by the search."""
