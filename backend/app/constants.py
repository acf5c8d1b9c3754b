DEFAULTS = {
    # Grid of antennas to load at startup
    "GRID_PATH": "data/antennas.txt",
    # Binary edge list written (and optionally restored) by the run script
    "EDGES_PATH": "data/edges.bin",
    # Vertex list written at the end of a run
    "RESULT_PATH": "data/result.txt",
    # Label given to deduced antinodes
    "MARKER_LABEL": "#",
    # Grid character meaning "no antenna"
    "EMPTY_LABEL": ".",
    # Deduce antinodes after loading the grid
    "DEDUCE_ANTINODES": True,
    # Link same-frequency antennas after loading the grid
    "LINK_SAME_FREQUENCY": True,
    # Restore edges from EDGES_PATH before linking
    "RESTORE_EDGES": False,
    # Insert both directions for each restored edge record
    "BIDIRECTIONAL_RESTORE": True,
    # Default traversal walk (depth_first | breadth_first)
    "TRAVERSAL_STRATEGY": "breadth_first",
    # Default traversal seed
    "START_X": 5,
    "START_Y": 2,
}
