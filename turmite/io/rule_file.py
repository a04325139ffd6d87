"""Parser for the line-oriented ``.mite`` rule-source format.

Each non-empty, non-comment line holds one rule::

    <state_in> <color_in> -> <state_out> <color_out> <turn>

where states are lowercase letters ``a``-``z``, colors are non-negative
integers and ``turn`` is one of ``forward|f``, ``backward|back``, ``left|l``,
``right|r`` (case-insensitive). Lines starting with ``#`` are comments.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from turmite.domain.errors import LoadError
from turmite.domain.heading import Turn
from turmite.domain.rules import Action, RuleTable, Signal, state_from_letter

logger = logging.getLogger(__name__)

_RULE_RE = re.compile(
    r"^(?P<state_in>\S)\s+(?P<color_in>\d+)\s*->\s*"
    r"(?P<state_out>\S)\s+(?P<color_out>\d+)\s+(?P<turn>\S+)$"
)


def parse_rules(text: str, num_colors: int | None = None, path: Path | None = None) -> RuleTable:
    """Parse rule-source text into a :class:`RuleTable`.

    When ``num_colors`` is given, colors outside ``[0, num_colors)`` are
    rejected. A second rule for an already-defined (state, color) pair is an
    error rather than silently overriding the first.

    Raises :exc:`LoadError` naming the offending line.
    """
    rules: dict[Signal, Action] = {}
    defined_at: dict[Signal, int] = {}

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        match = _RULE_RE.match(line)
        if match is None:
            raise LoadError(f"badly formatted rule: {line!r}", line_number, path)

        try:
            state_in = state_from_letter(match["state_in"])
            state_out = state_from_letter(match["state_out"])
            turn = Turn.from_word(match["turn"])
        except ValueError as exc:
            raise LoadError(str(exc), line_number, path) from exc

        color_in = int(match["color_in"])
        color_out = int(match["color_out"])
        if num_colors is not None:
            for color in (color_in, color_out):
                if color >= num_colors:
                    raise LoadError(
                        f"color {color} is outside the palette (0-{num_colors - 1})",
                        line_number,
                        path,
                    )

        signal = Signal(state=state_in, color=color_in)
        if signal in rules:
            raise LoadError(
                f"duplicate rule for state {match['state_in']!r} on color {color_in} "
                f"(first defined on line {defined_at[signal]})",
                line_number,
                path,
            )
        rules[signal] = Action(state=state_out, color=color_out, turn=turn)
        defined_at[signal] = line_number

    return RuleTable(rules)


def load_rules(path: Path | str, num_colors: int | None = None) -> RuleTable:
    """Read and parse a rule-source file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        raise LoadError(f"cannot read rule file: {exc.strerror or exc}", path=path) from exc
    except UnicodeDecodeError as exc:
        raise LoadError("rule file is not valid text", path=path) from exc

    table = parse_rules(text, num_colors=num_colors, path=path)
    logger.info("Read turmite with %d rules", len(table))
    return table
