import typer

from typing import List, Optional

from rich.console import Console

from chatlog.core import ChatlogError, Outcome, Workspace
from chatlog.core.exceptions import ConfigError, TargetNotRegularFile
from chatlog.core.workspace import Resolution

from chatlog_cli.options import Options, parse_option_words
from chatlog_cli.ui.chooser import numbered_choice
from chatlog_cli.utils import configure_logging, entry_age, open_in_editor

from pathlib import Path

"""
chatlog                      open today's entry for the last subject
chatlog wo                   open today's entry for the subject starting "wo"
chatlog yesterday wo         ... or yesterday's
chatlog -3 wo                ... or three days ago
chatlog 0704 wo              ... or the 4th of July this year
chatlog 20250704 wo          ... or that exact date
chatlog create work          make a new subject
chatlog ls                   list the subjects
chatlog ls wo                list the entries of a subject
chatlog latest wo            open the newest entry of a subject
chatlog -complete chatlog w  shell completion for subject names
"""

cli = typer.Typer(add_completion=False)


@cli.command(context_settings={"ignore_unknown_options": True})
def main(args: Optional[List[str]] = typer.Argument(None, help="[create|ls|latest] [DATE] [SUBJECT]"),
         verbose: bool = typer.Option(False, "--verbose", help="Log what chatlog is doing.")):
    """
    Open or create a dated log entry for a subject in your editor.
    """
    configure_logging(verbose)
    try:
        ws = Workspace()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    outcome = run(ws, args or [])
    for warning in outcome.warnings:
        typer.echo(warning, err=True)
    raise typer.Exit(outcome.exit_code)


def run(ws: Workspace, tokens: List[str]) -> Outcome:
    options, tokens = parse_option_words(tokens)

    if options.create:
        return create_subject(ws, tokens)
    if options.complete:
        return output_shell_completions(ws, tokens)

    resolution = ws.resolve(tokens, use_recent=not options.ls)
    outcome = resolution.outcome

    if resolution.prefix is None and options.ls:
        for subject in ws.fs.subjects():
            typer.echo(subject)
        return outcome

    if resolution.needs_choice and not choose_subject(ws, resolution):
        return outcome
    if resolution.subject is None:
        return outcome

    try:
        open_resolved(ws, resolution, options)
    except ChatlogError as e:
        outcome.record(e)
    return outcome


def choose_subject(ws: Workspace, resolution: Resolution) -> bool:
    answer = numbered_choice(resolution.match.candidates)
    return ws.choose(resolution, answer) is not None


def open_resolved(ws: Workspace, resolution: Resolution, options: Options) -> None:
    subject = resolution.subject
    outcome = resolution.outcome

    if options.ls:
        list_dates(ws, subject)
        if not resolution.date.explicit:
            return
    elif options.latest:
        latest = ws.latest_entry(subject)
        if latest is None:
            outcome.warn(f"No dated entries for {subject}")
            return
        open_entry(ws, latest, outcome)
        return

    open_entry(ws, resolution.path, outcome)


def open_entry(ws: Workspace, path: Path, outcome: Outcome) -> None:
    try:
        action = ws.target_action(path)
    except TargetNotRegularFile as e:
        outcome.record(e)
        return

    typer.echo(f"{action} {path}")
    try:
        open_in_editor(path, ws.config.editor)
    except OSError as e:
        outcome.warn(f"Cannot start editor {ws.config.editor}: {e}")


def list_dates(ws: Workspace, subject: str) -> None:
    console = Console(highlight=False, emoji=False, soft_wrap=True)
    dates, others = ws.fs.read_dates(subject)
    for name in dates:
        age = entry_age(name, ws.today())
        if age:
            console.print(f"{name}  [dim]{age}[/dim]")
        else:
            console.print(name, markup=False)
    for name in others:
        console.print(name, markup=False)


def create_subject(ws: Workspace, tokens: List[str]) -> Outcome:
    outcome = Outcome()
    if not tokens:
        outcome.warn("Need an explicit name to create")
        return outcome

    name = tokens[0]
    path = ws.create_subject(name, outcome)
    if path is not None:
        typer.echo(f"Created subject {name}.")
        open_entry(ws, ws.fs.entry_path(name, ws.today_string()), outcome)
    return outcome


def output_shell_completions(ws: Workspace, tokens: List[str]) -> Outcome:
    """
    Shell completion hook: `chatlog -complete <command> <word>` prints every
    subject starting with <word>.
    """
    outcome = Outcome()
    if len(tokens) < 2:
        outcome.warn("Need a word to complete")
        return outcome

    for subject in ws.completions(tokens[1]):
        typer.echo(subject)
    return outcome
