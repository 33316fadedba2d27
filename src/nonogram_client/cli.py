import random
import sys
from typing import Annotated, Any, List, Optional

import msgspec
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from nonogram_client.api.client import NonogramClient, NonogramFetchError
from nonogram_client.data.generator import load_data
from nonogram_client.schemas.nonogram import PuzzleId
from nonogram_client.utils.config import load_settings

app = typer.Typer(help="Nonogram Client: talk to the puzzle server.")
console = Console()

CYAN_STYLE = "cyan"
GREEN_STYLE = "green"
RED_STYLE = "red"
BOLD_STYLE = "bold"
DIM_STYLE = "dim"

DISPLAY_SYMBOL_FILLED = "█ "
DISPLAY_SYMBOL_EMPTY = "· "

SolutionGrid = List[List[Any]]


def get_client() -> NonogramClient:
    return NonogramClient(load_settings())


def parse_puzzle_id(raw: str) -> PuzzleId:
    """Numeric ids go back to the server as numbers, anything else as the raw string."""
    try:
        return msgspec.json.decode(raw, type=PuzzleId)
    except msgspec.DecodeError:
        return raw


def format_hints(hints) -> str:
    return " ".join(str(h) for h in hints)


def display_hints(row_hints, col_hints, title: str):
    table = Table(title=title, show_header=True, header_style=f"{BOLD_STYLE} {CYAN_STYLE}")
    table.add_column("#", style=DIM_STYLE, justify="right")
    table.add_column("Row Hints", justify="right")
    table.add_column("Column Hints", justify="right")

    for i in range(max(len(row_hints), len(col_hints))):
        row = format_hints(row_hints[i]) if i < len(row_hints) else ""
        col = format_hints(col_hints[i]) if i < len(col_hints) else ""
        table.add_row(str(i + 1), row, col)

    console.print(table)


def display_grid(grid):
    for row in grid:
        row_str = ''.join([DISPLAY_SYMBOL_FILLED if cell else DISPLAY_SYMBOL_EMPTY for cell in row])
        console.print(f"  {row_str}")


@app.command()
def board(seed: Optional[int] = typer.Option(None, help="Random seed for reproducibility")):
    rng = random.Random(seed)
    row_hints, col_hints = load_data(rng)
    display_hints(row_hints, col_hints, f"Placeholder Board ({len(row_hints)}x{len(col_hints)})")


@app.command()
def fetch():
    with get_client() as client:
        try:
            rows, columns, data, puzzle_id = client.load_random_nonogram()
        except NonogramFetchError as e:
            console.print(f"[{BOLD_STYLE} {RED_STYLE}]Error:[/{BOLD_STYLE} {RED_STYLE}] {escape(str(e))}")
            sys.exit(1)

    display_hints(rows, columns, f"Puzzle {puzzle_id}")
    console.print(f"\n[{BOLD_STYLE}]Solution:[/{BOLD_STYLE}]")
    display_grid(data)
    console.print(f"\n[{DIM_STYLE}]ID: {puzzle_id}[/{DIM_STYLE}]")


@app.command()
def check(
    puzzle_id: Annotated[str, typer.Argument(help="Identifier returned by 'fetch'")],
    solution: Annotated[str, typer.Argument(help="Solution grid as a JSON 2D array")],
):
    try:
        data = msgspec.json.decode(solution, type=SolutionGrid)
    except msgspec.DecodeError as e:
        console.print(f"[{RED_STYLE}]Error: solution is not a 2D JSON array: {escape(str(e))}[/{RED_STYLE}]")
        sys.exit(1)

    with get_client() as client:
        verdict = client.check_solution(parse_puzzle_id(puzzle_id), data)

    if verdict is None:
        console.print(f"[{RED_STYLE}]No verdict received.[/{RED_STYLE}]")
        sys.exit(1)

    console.print(f"[{BOLD_STYLE} {GREEN_STYLE}]Verdict:[/{BOLD_STYLE} {GREEN_STYLE}]")
    console.print(verdict)


@app.command()
def visit():
    with get_client() as client:
        client.count_visit()
    typer.echo("Visit sent.")


def main():
    app()


if __name__ == "__main__":
    main()
