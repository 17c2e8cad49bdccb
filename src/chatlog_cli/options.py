from dataclasses import dataclass
from typing import List, Tuple

"""
Leading words that change what chatlog does:

chatlog create <name>
chatlog ls [date] [subject]
chatlog latest [subject]
chatlog -complete <command> <prefix>
"""

OPTION_WORDS = ("create", "ls", "latest", "-complete")


@dataclass
class Options:
    create: bool = False
    complete: bool = False
    ls: bool = False
    latest: bool = False


def parse_option_words(tokens: List[str]) -> Tuple[Options, List[str]]:
    """
    Strip option words off the front of the arguments. `create` and
    `-complete` end the scan, since everything after them is theirs.
    """
    options = Options()
    remaining = list(tokens)
    while remaining and remaining[0] in OPTION_WORDS:
        word = remaining.pop(0)
        if word == "create":
            options.create = True
            break
        if word == "-complete":
            options.complete = True
            break
        if word == "ls":
            options.ls = True
        elif word == "latest":
            options.latest = True
    return options, remaining
