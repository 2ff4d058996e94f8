from typing import List

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from phone_encoder.encoding import is_digit_token
from phone_encoder.solver import NumberEncodings

COLORS = {
    "number": "cyan",
    "word": "spring_green2",
    "filler": "bold yellow",
    "none": "dim",
}


def solution_to_markup(solution: tuple) -> str:
    """Color words and filler digits differently."""
    tokens = []
    for token in solution:
        style = COLORS["filler"] if is_digit_token(token) else COLORS["word"]
        tokens.append(f"[{style}]{escape(token)}[/{style}]")
    return " ".join(tokens)


def render(results: List[NumberEncodings]) -> Table:
    """Render one row per encoding, grouped by number."""
    solution_count = sum(len(r.solutions) for r in results)
    table = Table(title=f"{len(results)} numbers  |  {solution_count} encodings")
    table.add_column("Number", style=COLORS["number"], no_wrap=True)
    table.add_column("Digits", style="dim", no_wrap=True)
    table.add_column("Encoding")

    for result in results:
        if not result.solutions:
            table.add_row(escape(result.number), result.digits, f"[{COLORS['none']}]no encoding[/{COLORS['none']}]")
            continue
        for i, solution in enumerate(result.solutions):
            label = escape(result.number) if i == 0 else ""
            digits = result.digits if i == 0 else ""
            table.add_row(label, digits, solution_to_markup(solution))

    return table


def get_progress(console: Console) -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=30),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
        transient=True,
        redirect_stdout=False,
    )
