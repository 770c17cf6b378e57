"""Game state holder — owns the position the rule checks run against."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.position import Position

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.move import Move
    from chessrules.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass
class GameState:
    """Exclusive owner of one :class:`Position`.

    This is a pure data/logic class — no threading, no UI, no turn order.
    """

    position: Position = field(default_factory=Position.initial)

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the position, from *fen* if given."""
        if fen is None:
            fen = STARTING_FEN
        self.position = position_from_fen(fen)
        _LOGGER.debug("Position set up from %r", fen)

    def apply_move(self, move: Move) -> Piece | None:
        """Relocate the moving piece and return whatever it displaced.

        Caller is responsible for the legality check.
        """
        _LOGGER.info("Moving piece: %s to %s", move.from_sq, move.to_sq)
        return self.position.relocate(move.from_sq, move.to_sq)

    def is_legal(self, move: Move) -> bool:
        return MoveGenerator(self.position).is_legal_move(move)

    def legal_moves(self, color: Color | None = None) -> list[Move]:
        """Pseudo-legal moves in the current position."""
        return MoveGenerator(self.position).generate_moves(color)

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)
