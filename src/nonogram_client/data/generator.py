import random
from typing import List, Tuple

# Bounds are half-open, see get_random
MIN_LINES = 5
MAX_LINES = 10
MIN_HINT_LEN = 2
MAX_HINT_LEN = 5

MIN_HINT_VALUE = 1
MAX_HINT_VALUE = 10


def get_random(min_value: int, max_value: int, rng=random) -> int:
    """Uniform integer in [min_value, max_value). The upper bound is never returned."""
    return rng.randrange(min_value, max_value)


def create_random_2d_array(rows: int, min_value: int, max_value: int, rng=random) -> List[List[int]]:
    arr = []
    for _ in range(rows):
        cols = get_random(MIN_HINT_LEN, MAX_HINT_LEN, rng)
        arr.append([rng.randint(min_value, max_value) for _ in range(cols)])
    return arr


def load_data(rng=random) -> Tuple[List[List[int]], List[List[int]]]:
    """
    Placeholder hints for a blank board: 5-9 rows and 5-9 columns,
    each with 2-4 run lengths in [1, 10]. Not guaranteed to be solvable.
    """
    row_values = create_random_2d_array(get_random(MIN_LINES, MAX_LINES, rng), MIN_HINT_VALUE, MAX_HINT_VALUE, rng)
    col_values = create_random_2d_array(get_random(MIN_LINES, MAX_LINES, rng), MIN_HINT_VALUE, MAX_HINT_VALUE, rng)
    return row_values, col_values
