import sys

import typer

from typing import Sequence


def numbered_choice(candidates: Sequence[str]) -> str:
    """
    Print the candidates as `n : name` and read back a single line. The
    answer is returned as typed; an empty string means end of input.
    """
    for number, name in enumerate(candidates, start=1):
        typer.echo(f"{number} : {name}")
    return sys.stdin.readline()
