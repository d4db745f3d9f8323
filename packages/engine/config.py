"""
Puzzle dimensions.

Single source of truth for the grid shape. Every class that needs a size takes
it as a keyword argument defaulting to these values, so a 6-letter variant is
just `Puzzle(word_length=6)`.
"""

# Letters per word (and cells per row).
WORD_LENGTH = 5

# Guesses per puzzle (rows in the grid).
NUM_ROWS = 6
