from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import AbstractSet, ClassVar, Optional, TextIO

from loguru import logger

from ..engine.board import render
from ..engine.side import SideView
from ..exceptions import EndOfInputError, MalformedInputError


def parse_choice(line: str) -> int:
    try:
        return int(line.strip())
    except ValueError as e:
        raise MalformedInputError(f"not a position: {line!r}") from e


@dataclass(slots=True)
class InteractiveAgent:
    """Asks a person to choose among the legal starts over text streams.

    Blocks until a valid choice is entered. Malformed or out-of-range input is
    retried; running out of input raises EndOfInputError to the caller.
    """

    key: ClassVar[str] = "human"
    name: str = "Human"
    input: Optional[TextIO] = None
    output: Optional[TextIO] = None

    def _say(self, *parts: object, end: str = "\n") -> None:
        out = self.output or sys.stdout
        print(*parts, end=end, file=out)
        out.flush()

    def choose_move(
        self,
        me: SideView,
        other: SideView,
        steps: int,
        options: AbstractSet[int],
    ) -> Optional[int]:
        self._say(f"Hello, {self.name}!")
        self._say("The current state (you are shown on top) is: ")
        self._say(render(me, other))
        self._say(f"You rolled a {steps}.")
        self._say("Your options are: ")
        for start in sorted(options):
            self._say(f"> {start}")
        self._say("What do you choose? ", end="")

        stream = self.input or sys.stdin
        while True:
            line = stream.readline()
            if not line:
                logger.warning(f"{self.name}: unexpected end of input")
                raise EndOfInputError(f"{self.name} ran out of input")
            try:
                choice = parse_choice(line)
            except MalformedInputError:
                self._say("Illegal format.")
                self._say("Please try again: ", end="")
                continue
            if choice not in options:
                self._say("Invalid option.")
                self._say("Please try again: ", end="")
                continue
            return choice
