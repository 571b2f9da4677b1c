"""Board state and the move rules of the game."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from itertools import product

from kchess.pieces import Color, Piece, PieceType

_EMPTY = Piece(PieceType.EMPTY)
_SQUARES = tuple(product(range(8), range(8)))
_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
_PROMOTIONS = {
    "Q": PieceType.QUEEN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
}
_WHITE_STYLE = "\x1b[1;97m"
_BLACK_STYLE = "\x1b[90m"
_RESET = "\x1b[0m"


def _on_board(*coords: int) -> bool:
    return all(0 <= c < 8 for c in coords)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules."""


@dataclass
class CastlingRights:
    """Which castling moves each side may still make."""

    white_king_side: bool = True
    white_queen_side: bool = True
    black_king_side: bool = True
    black_queen_side: bool = True

    def _allows(self, color: Color, king_side: bool) -> bool:
        if color is Color.WHITE:
            return self.white_king_side if king_side else self.white_queen_side
        return self.black_king_side if king_side else self.black_queen_side

    def _revoke(self, color: Color, king_side: bool) -> None:
        if color is Color.WHITE:
            if king_side:
                self.white_king_side = False
            else:
                self.white_queen_side = False
        elif king_side:
            self.black_king_side = False
        else:
            self.black_queen_side = False


@dataclass
class EnPassantTarget:
    """Square a pawn may capture onto en passant, if any."""

    row: int = 0
    col: int = 0
    possible: bool = False


class ChessBoard:
    """An 8x8 board with side to move, castling rights and en passant state.

    Rows and columns run from 0 to 7; row 0 is White's back rank.
    """

    def __init__(self) -> None:
        self._grid = [[_EMPTY] * 8 for _ in range(8)]
        for col, kind in enumerate(_BACK_RANK):
            self._grid[0][col] = Piece(kind, Color.WHITE)
            self._grid[1][col] = Piece(PieceType.PAWN, Color.WHITE)
            self._grid[6][col] = Piece(PieceType.PAWN, Color.BLACK)
            self._grid[7][col] = Piece(kind, Color.BLACK)
        self.current_turn = Color.WHITE
        self.game_over = False
        self.castling_rights = CastlingRights()
        self.en_passant_target = EnPassantTarget()

    @classmethod
    def empty(cls) -> ChessBoard:
        """Return a board with no pieces and no castling rights, White to move."""
        board = cls()
        board._grid = [[_EMPTY] * 8 for _ in range(8)]
        board.castling_rights = CastlingRights(False, False, False, False)
        return board

    def copy(self) -> ChessBoard:
        """Return an independent copy of this board."""
        clone = type(self).empty()
        clone._grid = [list(row) for row in self._grid]
        clone.current_turn = self.current_turn
        clone.game_over = self.game_over
        clone.castling_rights = replace(self.castling_rights)
        clone.en_passant_target = replace(self.en_passant_target)
        return clone

    def piece_at(self, row: int, col: int) -> Piece:
        """Return what stands on a square."""
        if not _on_board(row, col):
            raise IndexError(f"square ({row}, {col}) is off the board")
        return self._grid[row][col]

    def place(self, row: int, col: int, piece: Piece) -> None:
        """Put a piece on a square, replacing whatever was there."""
        if not _on_board(row, col):
            raise IndexError(f"square ({row}, {col}) is off the board")
        self._grid[row][col] = piece

    def render(self, colour: bool = False) -> str:
        """Return the board as text, rank 8 at the top."""
        lines = ["  a b c d e f g h"]
        for row in reversed(range(8)):
            cells = "".join(self._render_cell(p, colour) for p in self._grid[row])
            lines.append(f"{row + 1} {cells}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_cell(piece: Piece, colour: bool) -> str:
        text = f"{piece.symbol()} "
        if not colour or piece.type is PieceType.EMPTY:
            return text
        style = _WHITE_STYLE if piece.color is Color.WHITE else _BLACK_STYLE
        return f"{style}{text}{_RESET}"

    def _moved(self, from_row: int, from_col: int, to_row: int, to_col: int) -> ChessBoard:
        trial = self.copy()
        trial._grid[to_row][to_col] = trial._grid[from_row][from_col]
        trial._grid[from_row][from_col] = _EMPTY
        return trial

    def _path_clear(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        row_step = _sign(to_row - from_row)
        col_step = _sign(to_col - from_col)
        row, col = from_row + row_step, from_col + col_step
        while (row, col) != (to_row, to_col):
            if self._grid[row][col].type is not PieceType.EMPTY:
                return False
            row += row_step
            col += col_step
        return True

    def is_valid_pawn_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a pawn's step, double step from its start rank, or diagonal capture."""
        piece = self._grid[from_row][from_col]
        white = piece.color is Color.WHITE
        direction = 1 if white else -1
        start_row = 1 if white else 6
        target = self._grid[to_row][to_col]

        if from_col == to_col and to_row == from_row + direction and target.type is PieceType.EMPTY:
            return True
        if (
            from_row == start_row
            and from_col == to_col
            and to_row == from_row + 2 * direction
            and self._grid[from_row + direction][from_col].type is PieceType.EMPTY
            and target.type is PieceType.EMPTY
        ):
            return True
        return (
            to_row == from_row + direction
            and abs(to_col - from_col) == 1
            and target.type is not PieceType.EMPTY
            and target.color is not piece.color
        )

    @staticmethod
    def is_valid_knight_move(from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check the knight's L-shaped jump."""
        diff = {abs(to_row - from_row), abs(to_col - from_col)}
        return diff == {1, 2}

    def is_valid_bishop_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a diagonal move with nothing in between."""
        if abs(to_row - from_row) != abs(to_col - from_col):
            return False
        return self._path_clear(from_row, from_col, to_row, to_col)

    def is_valid_rook_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a straight move along a rank or file with nothing in between."""
        if from_row != to_row and from_col != to_col:
            return False
        return self._path_clear(from_row, from_col, to_row, to_col)

    def is_valid_queen_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a move that a bishop or a rook could make."""
        return self.is_valid_bishop_move(from_row, from_col, to_row, to_col) or self.is_valid_rook_move(
            from_row, from_col, to_row, to_col
        )

    def is_valid_king_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a single step in any direction."""
        return abs(to_row - from_row) <= 1 and abs(to_col - from_col) <= 1

    def is_valid_en_passant(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a pawn capturing onto the current en passant square."""
        target = self.en_passant_target
        if not target.possible:
            return False
        piece = self._grid[from_row][from_col]
        if piece.type is not PieceType.PAWN:
            return False
        direction = 1 if piece.color is Color.WHITE else -1
        return (
            from_row + direction == to_row
            and abs(from_col - to_col) == 1
            and to_row == target.row
            and to_col == target.col
        )

    def is_valid_castling(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check a king's two-square castling move."""
        piece = self._grid[from_row][from_col]
        if piece.type is not PieceType.KING:
            return False
        if self.is_check(piece.color):
            return False

        king_side = to_col > from_col
        if not self.castling_rights._allows(piece.color, king_side):
            return False

        step = 1 if king_side else -1
        rook_col = 7 if king_side else 0
        if any(
            self._grid[from_row][col].type is not PieceType.EMPTY
            for col in range(from_col + step, rook_col, step)
        ):
            return False

        return not any(
            self._moved(from_row, from_col, from_row, col).is_check(piece.color)
            for col in range(from_col + step, to_col + step, step)
        )

    def update_castling_rights(self, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        """Drop castling rights for the king or rook standing on the from square."""
        piece = self._grid[from_row][from_col]
        if piece.type is PieceType.KING:
            self.castling_rights._revoke(piece.color, king_side=True)
            self.castling_rights._revoke(piece.color, king_side=False)
        elif piece.type is PieceType.ROOK:
            if from_col == 0:
                self.castling_rights._revoke(piece.color, king_side=False)
            if from_col == 7:
                self.castling_rights._revoke(piece.color, king_side=True)

    def handle_pawn_promotion(
        self, row: int, col: int, choose: Callable[[], str] | None = None
    ) -> PieceType | None:
        """Promote a piece that reached the far rank; return the new type.

        ``choose`` is asked for one of Q, R, B or N; anything else, or no
        chooser at all, gives a queen.
        """
        piece = self._grid[row][col]
        if piece.type is PieceType.EMPTY:
            return None
        if not ((row == 7 and piece.color is Color.WHITE) or (row == 0 and piece.color is Color.BLACK)):
            return None
        choice = choose().strip()[:1] if choose is not None else "Q"
        new_type = _PROMOTIONS.get(choice, PieceType.QUEEN)
        self._grid[row][col] = Piece(new_type, piece.color)
        return new_type

    def is_valid_move(self, from_row: int, from_col: int, to_row: int, to_col: int) -> bool:
        """Check whether the side to move may make this move."""
        if not _on_board(from_row, from_col, to_row, to_col):
            return False
        piece = self._grid[from_row][from_col]
        if piece.type is PieceType.EMPTY:
            return False
        if piece.color is not self.current_turn:
            return False
        target = self._grid[to_row][to_col]
        if target.type is not PieceType.EMPTY and target.color is piece.color:
            return False

        if piece.type is PieceType.KING and abs(to_col - from_col) == 2:
            return self.is_valid_castling(from_row, from_col, to_row, to_col)
        if piece.type is PieceType.PAWN and self.is_valid_en_passant(from_row, from_col, to_row, to_col):
            return True

        rules = {
            PieceType.PAWN: self.is_valid_pawn_move,
            PieceType.KNIGHT: self.is_valid_knight_move,
            PieceType.BISHOP: self.is_valid_bishop_move,
            PieceType.ROOK: self.is_valid_rook_move,
            PieceType.QUEEN: self.is_valid_queen_move,
            PieceType.KING: self.is_valid_king_move,
        }
        if not rules[piece.type](from_row, from_col, to_row, to_col):
            return False
        return not self._moved(from_row, from_col, to_row, to_col).is_check(piece.color)

    def _valid_moves(self, color: Color) -> Iterator[tuple[int, int, int, int]]:
        for from_row, from_col in _SQUARES:
            piece = self._grid[from_row][from_col]
            if piece.type is PieceType.EMPTY or piece.color is not color:
                continue
            for to_row, to_col in _SQUARES:
                if self.is_valid_move(from_row, from_col, to_row, to_col):
                    yield from_row, from_col, to_row, to_col

    def is_check(self, color: Color) -> bool:
        """Check whether any opposing piece may move onto this side's king."""
        king = next(
            (
                (row, col)
                for row, col in _SQUARES
                if self._grid[row][col].type is PieceType.KING and self._grid[row][col].color is color
            ),
            None,
        )
        if king is None:
            return False
        opponent = color.opponent()
        return any(
            self.is_valid_move(row, col, *king)
            for row, col in _SQUARES
            if self._grid[row][col].type is not PieceType.EMPTY and self._grid[row][col].color is opponent
        )

    def is_checkmate(self, color: Color) -> bool:
        """Check whether this side is in check and no move gets it out."""
        if not self.is_check(color):
            return False
        return all(self._moved(*move).is_check(color) for move in self._valid_moves(color))

    def is_stalemate(self, color: Color) -> bool:
        """Check whether this side is not in check and has no valid move."""
        if self.is_check(color):
            return False
        return next(self._valid_moves(color), None) is None

    def make_move(
        self,
        from_row: int,
        from_col: int,
        to_row: int,
        to_col: int,
        choose_promotion: Callable[[], str] | None = None,
    ) -> Piece | None:
        """Play a move for the side to move and return the captured piece, if any.

        Capturing the king ends the game and leaves the turn with the winner.
        """
        if not self.is_valid_move(from_row, from_col, to_row, to_col):
            raise IllegalMoveError(f"illegal move from ({from_row}, {from_col}) to ({to_row}, {to_col})")

        grid = self._grid
        piece = grid[from_row][from_col]
        captured = grid[to_row][to_col]
        if captured.type is PieceType.KING:
            self.game_over = True

        if piece.type is PieceType.KING and abs(to_col - from_col) == 2:
            king_side = to_col > from_col
            rook_from = 7 if king_side else 0
            rook_to = to_col - 1 if king_side else to_col + 1
            grid[to_row][rook_to] = grid[from_row][rook_from]
            grid[from_row][rook_from] = _EMPTY

        if piece.type is PieceType.PAWN and self.is_valid_en_passant(from_row, from_col, to_row, to_col):
            captured = grid[from_row][to_col]
            grid[from_row][to_col] = _EMPTY

        grid[to_row][to_col] = piece
        grid[from_row][from_col] = _EMPTY

        self.handle_pawn_promotion(to_row, to_col, choose_promotion)
        self.update_castling_rights(from_row, from_col, to_row, to_col)

        if piece.type is PieceType.PAWN and abs(to_row - from_row) == 2:
            self.en_passant_target = EnPassantTarget((from_row + to_row) // 2, to_col, True)
        else:
            self.en_passant_target = EnPassantTarget()

        if not self.game_over:
            self.current_turn = self.current_turn.opponent()

        return captured if captured.type is not PieceType.EMPTY else None