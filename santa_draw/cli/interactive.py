from __future__ import annotations

import sys
from typing import Callable, Optional

from loguru import logger
from termcolor import colored

from santa_draw import __version__
from santa_draw.services.assignment import Assignment, AssignmentError, GivingUpError, Group

Prompt = Callable[[str], str]
Echo = Callable[[str], None]

# Moves the cursor up one line and clears it, hiding the revealed name.
HIDE_PREVIOUS_LINE = "\x1b[1A\x1b[K******\n"


def prompt_stderr(text: str) -> str:
    """Like ``input`` but writes the prompt to stderr, keeping stdout for output."""
    sys.stderr.write(text)
    sys.stderr.flush()
    return input()


def error(text: str) -> str:
    return colored(text, "red")


def ask(prompt: Prompt, text: str) -> str:
    try:
        return prompt(text).strip()
    except EOFError:
        return ""


def collect_names(group: Group, prompt: Prompt, echo: Echo) -> None:
    echo("\nWho's in?\n(List one name per line and press enter, end the list with an empty line.)\n")
    while True:
        name = ask(prompt, "Name: ")
        if not name:
            return
        group.add(name)


def ask_known_name(number: int, group: Group, prompt: Prompt, echo: Echo) -> Optional[str]:
    while True:
        name = ask(prompt, f"Name {number}: ")
        if not name:
            return None
        if not group.contains_name(name):
            echo(error(f"Invalid name: {name}"))
            continue
        return name


def collect_exclusions(group: Group, prompt: Prompt, echo: Echo, directed: bool) -> None:
    arrow = "->" if directed else "<->"
    while True:
        first = ask_known_name(1, group, prompt, echo)
        if first is None:
            return
        second = ask_known_name(2, group, prompt, echo)
        if second is None:
            return
        echo(f"OK, excluding the pair {first} {arrow} {second}")
        echo("Someone else?")
        if directed:
            group.exclude(first, second)
        else:
            group.exclude_pair(first, second)


def reveal(assignments: Assignment, prompt: Prompt, echo: Echo) -> None:
    echo("I'll show a name, first. That person should come to the computer,")
    echo("without other people seeing the screen.")
    echo("Press enter to reveal the name, press enter again to hide it.\n")
    for giver, receiver in assignments:
        ask(prompt, f"{giver}, are you ready? Press enter to see the name.")
        ask(prompt, f"You'll give a gift to {receiver}! (Press enter to hide the name)")
        echo(HIDE_PREVIOUS_LINE)


def run(group: Group, prompt: Prompt = prompt_stderr, echo: Echo = print) -> int:
    """Walk a human through the draw. Returns the process exit code."""
    echo(colored(f"Santa Draw v{__version__}", "green", attrs=["bold"]))

    collect_names(group, prompt, echo)

    echo("\nAlright. Are there any pairs that should not give each other gifts?")
    echo("If you're done, just press enter.")
    collect_exclusions(group, prompt, echo, directed=False)

    echo("\nAnd now, are there any pairs where person 1 should not give person 2 a gift?")
    echo("If you're done, just press enter.")
    collect_exclusions(group, prompt, echo, directed=True)

    echo("\nGreat! Now we'll draw the names.")
    try:
        assignments = group.assign()
    except GivingUpError as exc:
        logger.bind(participants=len(group)).info("Draw gave up: {error}", error=str(exc))
        echo(
            error(
                f"Hmm, I'm sorry. Even after {exc.attempts} attempts, I did not manage to find\n"
                "assignments where all constraints are satisfied..."
            )
        )
        return 1
    except AssignmentError as exc:
        echo(error(f"Error: {exc}"))
        return 1

    reveal(assignments, prompt, echo)
    echo("Happy gift-giving!")
    return 0
