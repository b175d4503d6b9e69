# Configuration: colors, code length, opening guess, turn limits, etc.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Available colors (see color set below)
    "max_attempts": 10,  # Hard guard on turns per game
    "turn_bound": 6,  # Expected worst case for the minimax solver
    "opening_guess": "RRGG",  # Fixed first guess (two reds, two greens)
    "colors": [
        "R",
        "G",
        "B",
        "Y",
        "b",
        "w",
    ],  # Ordinal order: Red, Green, Blue, Yellow, black, white
    "display": {
        "names": {  # Long names, used by CLI help and logs
            "R": "red",
            "G": "green",
            "B": "blue",
            "Y": "yellow",
            "b": "black",
            "w": "white",
        }
    },
    "parallel": {
        "num_workers": 8,  # Chunks / workers for the multi-worker strategy
    },
}
