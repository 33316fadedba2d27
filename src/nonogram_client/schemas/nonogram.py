from typing import Any, List, Union

import msgspec

PuzzleId = Union[str, int]


class Puzzle(msgspec.Struct, frozen=True):
    rows: List[List[int]]
    columns: List[List[int]]
    data: List[List[Any]]
    id: PuzzleId

    def as_tuple(self):
        return self.rows, self.columns, self.data, self.id


class Solution(msgspec.Struct):
    id: PuzzleId
    data: List[List[Any]]


class SolutionSubmission(msgspec.Struct):
    solution: Solution
