"""Sample puzzle literals, 81 characters each, 0 for unknown cells."""

from __future__ import annotations
from typing import Dict, List

from ..core.board import Board


SAMPLE_PUZZLES: Dict[str, str] = {
    # http://www.websudoku.com/?level=1&set_id=5652623571
    "easy": (
        "700205190"
        "310008504"
        "502090030"
        "030000400"
        "601000309"
        "004000060"
        "090070205"
        "107900046"
        "065102003"
    ),
    # http://www.websudoku.com/?level=3&set_id=3358713602
    "hard": (
        "460001500"
        "000003006"
        "501700000"
        "900000060"
        "807090403"
        "050000002"
        "000004107"
        "300100000"
        "009800035"
    ),
    # http://www.websudoku.com/?level=4&set_id=5056738353
    "evil": (
        "005600000"
        "900500730"
        "000014000"
        "087000006"
        "006802900"
        "500000310"
        "000960000"
        "078001002"
        "000007400"
    ),
    "classic": (
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    ),
}


def sample_names() -> List[str]:
    return list(SAMPLE_PUZZLES)


def get_sample(name: str) -> Board:
    """Return a fresh board for a named sample puzzle."""
    try:
        puzzle = SAMPLE_PUZZLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown sample {name!r}, expected one of: {', '.join(SAMPLE_PUZZLES)}"
        ) from None
    return Board.from_string(puzzle)
