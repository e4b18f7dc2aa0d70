"""
Flattening of SVG path data (the `d` attribute) into absolute points.

Only straight polylines are understood: M, m, L and a terminating Z/z.
Every other command letter is recognised but rejected, since skipping it
would silently produce wrong geometry.
"""
import re
from enum import Enum
from typing import List, Optional

import numpy as np

from .errors import UnsupportedCommandError, MalformedPathDataError
from .transforms import parse_number


class PathCommand(Enum):
    MOVETO = 'M'
    MOVETO_REL = 'm'
    LINETO = 'L'
    LINETO_REL = 'l'
    HLINE = 'H'
    HLINE_REL = 'h'
    VLINE = 'V'
    VLINE_REL = 'v'
    CUBIC = 'C'
    CUBIC_REL = 'c'
    SMOOTH_CUBIC = 'S'
    SMOOTH_CUBIC_REL = 's'
    QUADRATIC = 'Q'
    QUADRATIC_REL = 'q'
    SMOOTH_QUADRATIC = 'T'
    SMOOTH_QUADRATIC_REL = 't'
    ARC = 'A'
    ARC_REL = 'a'
    CLOSE = 'Z'
    CLOSE_REL = 'z'


_COMMANDS = {cmd.value: cmd for cmd in PathCommand}


def command_of(token: str) -> Optional[PathCommand]:
    """Returns the command a token stands for, or None for a coordinate."""
    return _COMMANDS.get(token)


def tokenize(d: str) -> List[str]:
    return [tok for tok in re.split(r'[\s,]+', d) if tok]


class _TokenStream:
    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def at_coordinate(self):
        """True while the next token exists and is not a command letter."""
        return self.pos < len(self.tokens) and command_of(self.tokens[self.pos]) is None

    def next(self):
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def number(self, cmd):
        if not self.at_coordinate():
            where = "end of path data" if self.pos >= len(self.tokens) else repr(self.tokens[self.pos])
            raise MalformedPathDataError(f"incomplete coordinate pair for {cmd.value!r} at {where}")
        tok = self.next()
        try:
            return parse_number(tok)
        except ValueError:
            raise MalformedPathDataError(f"bad number {tok!r} in path data", token=tok) from None

    def pair(self, cmd):
        x = self.number(cmd)
        y = self.number(cmd)
        return x, y


def flatten(d: str, relative_moveto: bool = True) -> np.ndarray:
    """
    Parses path data into an (N, 2) array of untransformed absolute points,
    in drawing order.

    relative_moveto=False rejects `m` as well, for level files that must
    be authored with absolute commands only.
    """
    stream = _TokenStream(tokenize(d))
    positions = []

    while stream.pos < len(stream.tokens):
        token = stream.next()
        cmd = command_of(token)

        if cmd is None:
            raise MalformedPathDataError(f"coordinate {token!r} before any command", token=token)

        if cmd in (PathCommand.MOVETO, PathCommand.LINETO):
            while stream.at_coordinate():
                positions.append(stream.pair(cmd))

        elif cmd is PathCommand.MOVETO_REL and relative_moveto:
            # Running point restarts at the origin for every `m`
            prev = (0.0, 0.0)
            while stream.at_coordinate():
                dx, dy = stream.pair(cmd)
                prev = (prev[0] + dx, prev[1] + dy)
                positions.append(prev)

        elif cmd in (PathCommand.CLOSE, PathCommand.CLOSE_REL):
            break

        else:
            raise UnsupportedCommandError(f"unsupported path command {token!r}", token=token)

    return np.array(positions, dtype=float).reshape(-1, 2)
