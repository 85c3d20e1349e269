from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from .alphabet import LETTERS, is_letter, to_symbol
from .errors import PlugBoardError

logger = logging.getLogger(__name__)


class PlugBoard:
    """Front-panel patch board: a partial, symmetric swap of letter pairs.

    Built once before the machine runs; during translation only
    :meth:`map` is called. Unwired ports pass the signal straight through.
    """

    def __init__(self) -> None:
        self.mapping: Dict[int, int] = {}

    @classmethod
    def with_mappings(cls, pairs: Iterable[Tuple[str, str]]) -> "PlugBoard":
        """Connect every pair in order; the first invalid pair raises PlugBoardError."""
        pb = cls()
        for a, b in pairs:
            pb.add_mapping(a, b)
        return pb

    def add_mapping(self, a: str, b: str) -> None:
        if not (is_letter(a) and is_letter(b)):
            msg = (
                "Error in PlugBoard configuration. Can only map alphabetic "
                f"characters. Received {a!r} {b!r}"
            )
            logger.warning(msg)
            raise PlugBoardError(msg)

        a, b = a.upper(), b.upper()
        if a == b:
            msg = f"Error in PlugBoard configuration. Cannot connect {a} to itself"
            logger.warning(msg)
            raise PlugBoardError(msg)

        for ch in (a, b):
            if to_symbol(ch) in self.mapping:
                msg = f"Error in PlugBoard configuration. Duplicate mapping for {ch} encountered"
                logger.warning(msg)
                raise PlugBoardError(msg)

        sa, sb = to_symbol(a), to_symbol(b)
        self.mapping[sa] = sb
        self.mapping[sb] = sa

    def map(self, symbol: int) -> int:
        return self.mapping.get(symbol, symbol)

    def is_wired(self, ch: str) -> bool:
        return is_letter(ch) and to_symbol(ch) in self.mapping

    def pairs(self) -> List[Tuple[str, str]]:
        """One ``(low, high)`` entry per cable, sorted."""
        return sorted((LETTERS[a], LETTERS[b]) for a, b in self.mapping.items() if a < b)

    def __len__(self) -> int:
        return len(self.mapping) // 2

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs()]
        return f"<PlugBoard {' '.join(swaps)}>"
