from typing import Optional

import click
from rich.console import Console

from phone_encoder.dictionary import Dictionary, load_dictionary
from phone_encoder.encoding import digit_value_to_digits, word_to_digit_value
from phone_encoder.log_config import configure_logging
from phone_encoder.solver import PartialSolution, format_solution, solve_numbers
from phone_encoder.ui import get_progress, render
from phone_encoder.utils import InputFileError, read_lines

DEFAULT_WORDS_FILE = "tests/words.txt"
DEFAULT_NUMBERS_FILE = "tests/numbers.txt"


@click.group()
def cli():
    pass


def print_solution(number: str, solution: PartialSolution) -> None:
    click.echo(format_solution(number, solution))


def run_batch(numbers: list[str], dictionary: Dictionary, output_format: str, progress_console: Optional[Console]):
    """Search every number, printing as encodings are found or as one table at the end."""
    emit = print_solution if output_format == "plain" else None

    if progress_console is None:
        results = solve_numbers(numbers, dictionary, emit)
    else:
        with get_progress(progress_console) as progress:
            task = progress.add_task("Encoding", total=len(numbers))
            results = solve_numbers(numbers, dictionary, emit, on_number=lambda _: progress.advance(task))

    if output_format == "table":
        Console().print(render(results))
    return results


@cli.command()
@click.argument("words_file", default=DEFAULT_WORDS_FILE, required=False)
@click.argument("numbers_file", default=DEFAULT_NUMBERS_FILE, required=False)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["plain", "table"]),
    default="plain",
    help="Print one line per encoding, or a table once all numbers are done.",
)
@click.option("--progress", is_flag=True, help="Show a progress bar on stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--log-json", is_flag=True, help="Emit log lines as JSON")
def encode(words_file: str, numbers_file: str, output_format: str, progress: bool, verbose: bool, log_json: bool):
    """Print every encoding of each number in NUMBERS_FILE using the words in WORDS_FILE."""
    configure_logging(verbose=verbose, json_logs=log_json)

    # Both inputs are read before any output so a bad path aborts cleanly.
    try:
        dictionary = load_dictionary(words_file)
        numbers = list(read_lines(numbers_file))
    except InputFileError as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()

    progress_console = Console(stderr=True) if progress else None
    run_batch(numbers, dictionary, output_format, progress_console)


@cli.command()
@click.argument("words", nargs=-1, required=True)
def digits(words: tuple[str, ...]):
    """Print the keypad digits each WORD encodes to."""
    for word in words:
        click.echo(f"{word}: {digit_value_to_digits(word_to_digit_value(word))}")


if __name__ == "__main__":
    cli()
