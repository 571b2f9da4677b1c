"""Interactive two-player game on the console."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from kchess.board import ChessBoard
from kchess.pieces import Color, PieceType

INTRO = (
    "체스 게임을 시작합니다!\n"
    "이동은 '시작위치 목적지' 형식으로 입력하세요 (예: e2 e4)\n"
    "캐슬링은 'e1 g1'(킹사이드) 또는 'e1 c1'(퀸사이드)로 입력하세요\n"
)
MOVE_PROMPT = "이동할 말의 위치를 입력하세요 (예: e2 e4): "
PROMOTION_PROMPT = "폰이 승급할 수 있습니다. 원하는 말을 선택하세요 (Q/R/B/N): "
BAD_INPUT = "잘못된 입력입니다. 다시 시도하세요.\n"
BAD_MOVE = "잘못된 이동입니다. 다시 시도하세요.\n"
STALEMATE = "\n스테일메이트! 무승부입니다.\n"

_SIDE_NAMES = {Color.WHITE: "흰색", Color.BLACK: "검은색"}


def parse_square(text: str) -> tuple[int, int]:
    """Turn a square name such as ``e2`` into ``(row, col)`` indices."""
    if len(text) != 2:
        raise ValueError(f"not a square: {text!r}")
    col = ord(text[0]) - ord("a")
    row = ord(text[1]) - ord("1")
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"square off the board: {text!r}")
    return row, col


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield input words, each cut into pieces of at most two characters."""
    for line in lines:
        for word in line.split():
            yield from (word[i : i + 2] for i in range(0, len(word), 2))


def play(
    board: ChessBoard,
    lines: Iterable[str],
    out: TextIO,
    choose_promotion: Callable[[], str] | None = None,
) -> Color | None:
    """Run the game loop until it ends or input runs out.

    Returns the winning side, or None after a draw or when input ends.
    Without ``choose_promotion`` the promotion piece is read from the input.
    """
    tokens = _tokens(lines)
    colour = bool(getattr(out, "isatty", lambda: False)())

    if choose_promotion is None:

        def choose_promotion() -> str:
            out.write(PROMOTION_PROMPT)
            return next(tokens, "")

    winner: Color | None = None
    while not board.game_over:
        out.write(board.render(colour))
        out.write(f"\n{_SIDE_NAMES[board.current_turn]}의 차례입니다.\n")
        out.write(MOVE_PROMPT)

        origin = next(tokens, None)
        destination = next(tokens, None)
        if destination is None:
            if origin is not None:
                out.write(BAD_INPUT)
            return None

        try:
            from_row, from_col = parse_square(origin)
            to_row, to_col = parse_square(destination)
        except ValueError:
            out.write(BAD_MOVE)
            continue

        if not board.is_valid_move(from_row, from_col, to_row, to_col):
            out.write(BAD_MOVE)
            continue

        mover = board.current_turn
        captured = board.make_move(from_row, from_col, to_row, to_col, choose_promotion)
        if captured is not None and captured.type is PieceType.KING:
            out.write(f"\n킹이 잡혔습니다! {_SIDE_NAMES[mover]}의 승리입니다!\n")
            winner = mover

        if board.is_checkmate(board.current_turn):
            winner = board.current_turn.opponent()
            out.write(f"\n체크메이트! {_SIDE_NAMES[winner]}의 승리입니다!\n")
            board.game_over = True
        elif board.is_stalemate(board.current_turn):
            out.write(STALEMATE)
            board.game_over = True
            winner = None

    return winner


def main(argv: list[str] | None = None) -> int:
    """Start a game reading moves from standard input."""
    parser = argparse.ArgumentParser(prog="kchess", description="Play chess on the console.")
    parser.parse_args(argv)
    out = sys.stdout
    out.write(INTRO)
    play(ChessBoard(), sys.stdin, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())