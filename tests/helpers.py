"""
Sample custom value type shared by the test modules.
"""

from dataclasses import dataclass

from chatcmd.commands import ArgumentParseFailure, TypeParser


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def parse_point(position, text):
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise ArgumentParseFailure(f'Error parsing argument {position}: "{text}" is not x,y')
    return Point(x, y)


POINT_PARSER = TypeParser(Point, parse_point, example="1,2")
