# plugins/dice/entrypoint.py
from __future__ import annotations

import random
import re
from dataclasses import dataclass

from chatcmd.commands import ArgumentParseFailure, Parameter, TypeParser, command
from chatcmd.interface.loader import PluginDescriptor

from . import GUID

_DICE_RE = re.compile(r"^(\d*)d(\d+)$", re.IGNORECASE)

MAX_COUNT = 100


@dataclass(frozen=True, slots=True)
class Dice:
    count: int
    sides: int

    def roll(self, rng: random.Random | None = None) -> list[int]:
        rng = rng or random
        return [rng.randint(1, self.sides) for _ in range(self.count)]

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


def parse_dice(position: int, text: str) -> Dice:
    """'2d6' -> Dice(2, 6); a bare 'd20' means one die."""
    m = _DICE_RE.match(text.strip())
    if not m:
        raise ArgumentParseFailure(
            f'Error parsing argument {position}: "{text}" is not in NdM form')
    count = int(m.group(1) or 1)
    sides = int(m.group(2))
    if not 1 <= count <= MAX_COUNT or sides < 2:
        raise ArgumentParseFailure(
            f"Error parsing argument {position}: use 1-{MAX_COUNT} dice with at least 2 sides")
    return Dice(count, sides)


DICE_PARSER = TypeParser(Dice, parse_dice, example="2d6")


# ---------- roll ----------
@command(
    name="roll",
    description="Roll some dice (default 1d6).",
    parameters=[Parameter("dice", Dice, optional=True, description="e.g. 2d6")],
)
def roll(name, args):
    dice = args.value(0, Dice(1, 6))
    faces = dice.roll()
    if len(faces) == 1:
        return f"{dice}: {faces[0]}"
    return f"{dice}: {' + '.join(map(str, faces))} = {sum(faces)}"


# ---------- coin ----------
@command(name="coin flip", description="Flip a coin.")
def coin_flip(name, args):
    return random.choice(("Heads", "Tails"))


def register() -> PluginDescriptor:
    return PluginDescriptor(guid=GUID, commands=[roll, coin_flip], parsers=[DICE_PARSER])
