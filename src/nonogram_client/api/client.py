from typing import Any, List, Optional

import httpx
import msgspec
from rich.console import Console
from rich.markup import escape

from nonogram_client.schemas.nonogram import Puzzle, PuzzleId, Solution, SolutionSubmission
from nonogram_client.utils.config import ServerConfig

GET_RANDOM_ENDPOINT = "nonogram.getRandom"
CHECK_SOLUTION_ENDPOINT = "nonogram.checkSolution"
COUNT_VISIT_ENDPOINT = "nonogram.countVisit"

HTTP_OK = 200
JSON_HEADERS = {"Content-Type": "application/json"}

# Everything httpx can raise for a single request, bad URLs included
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)

console = Console()


class NonogramFetchError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NonogramClient:
    """
    Blocking wrapper around the nonogram endpoints of the game server.

    Session cookies live in the underlying httpx.Client, so every request
    carries whatever credentials the server has set. An injected client is
    left open on close(); one created here is closed with it.
    """

    def __init__(self, config: ServerConfig, http_client: Optional[httpx.Client] = None):
        self.config = config
        self._owns_client = http_client is None
        # No timeout: wait for the server as long as it takes
        self.http = http_client if http_client is not None else httpx.Client(timeout=None)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_client:
            self.http.close()

    def load_random_nonogram(self):
        """
        Fetches a server-chosen puzzle.

        Returns:
            (rows, columns, data, id) as sent by the server.

        Raises:
            NonogramFetchError: on any non-200 status, transport failure
                or a body that is not a puzzle.
        """
        try:
            response = self.http.get(self.config.endpoint(GET_RANDOM_ENDPOINT))
        except REQUEST_ERRORS as e:
            raise NonogramFetchError(f"Failed to load nonogram: {e}") from e

        if response.status_code != HTTP_OK:
            raise NonogramFetchError("Failed to load nonogram", status_code=response.status_code)

        try:
            puzzle = msgspec.json.decode(response.content, type=Puzzle)
        except msgspec.DecodeError as e:
            raise NonogramFetchError(f"Failed to load nonogram: {e}", status_code=response.status_code) from e

        return puzzle.as_tuple()

    def check_solution(self, puzzle_id: PuzzleId, data: List[List[Any]]) -> Optional[Any]:
        """Returns the server's verdict, or None if it could not be obtained for any reason."""
        payload = msgspec.json.encode(SolutionSubmission(solution=Solution(id=puzzle_id, data=data)))
        try:
            response = self.http.post(
                self.config.endpoint(CHECK_SOLUTION_ENDPOINT),
                content=payload,
                headers=JSON_HEADERS,
            )
        except REQUEST_ERRORS as e:
            console.print(f"[dim]Solution check unavailable: {escape(str(e))}[/dim]")
            return None

        if response.status_code != HTTP_OK:
            return None

        try:
            return msgspec.json.decode(response.content)
        except msgspec.DecodeError as e:
            console.print(f"[dim]Unreadable verdict: {escape(str(e))}[/dim]")
            return None

    def count_visit(self) -> None:
        try:
            self.http.post(self.config.endpoint(COUNT_VISIT_ENDPOINT))
        except REQUEST_ERRORS as e:
            console.print(f"[dim]Visit not counted: {escape(str(e))}[/dim]")
