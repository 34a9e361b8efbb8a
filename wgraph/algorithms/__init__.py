"""Search algorithms and the priority queue they run on."""
