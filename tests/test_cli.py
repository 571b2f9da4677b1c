import io

import pytest

from kchess.board import ChessBoard
from kchess.cli import main, parse_square, play
from kchess.pieces import Color, Piece, PieceType


@pytest.mark.parametrize(
    ("text", "expected"),
    [("a1", (0, 0)), ("h8", (7, 7)), ("e2", (1, 4))],
)
def test_parse_square(text, expected):
    assert parse_square(text) == expected


@pytest.mark.parametrize("text", ["", "e", "e22", "i1", "a9", "a0", "11"])
def test_parse_square_rejects_bad_names(text):
    with pytest.raises(ValueError):
        parse_square(text)


def test_play_makes_a_move_then_stops_at_end_of_input():
    board = ChessBoard()
    out = io.StringIO()
    assert play(board, ["e2 e4\n"], out) is None
    assert board.piece_at(3, 4) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.piece_at(1, 4).type is PieceType.EMPTY
    assert board.current_turn is Color.BLACK
    assert "검은색의 차례입니다." in out.getvalue()


def test_play_splits_joined_squares():
    board = ChessBoard()
    play(board, ["e2e4"], io.StringIO())
    assert board.piece_at(3, 4) == Piece(PieceType.PAWN, Color.WHITE)


def test_play_reports_illegal_move_and_keeps_turn():
    board = ChessBoard()
    out = io.StringIO()
    play(board, ["e2 e5", "z9 e4"], out)
    assert out.getvalue().count("잘못된 이동입니다. 다시 시도하세요.") == 2
    assert board.piece_at(1, 4) == Piece(PieceType.PAWN, Color.WHITE)
    assert board.current_turn is Color.WHITE


def test_play_reports_incomplete_input():
    out = io.StringIO()
    assert play(ChessBoard(), ["e2"], out) is None
    assert "잘못된 입력입니다. 다시 시도하세요." in out.getvalue()


def _promotion_board():
    board = ChessBoard.empty()
    board.place(6, 0, Piece(PieceType.PAWN, Color.WHITE))
    board.place(0, 4, Piece(PieceType.KING, Color.WHITE))
    board.place(5, 7, Piece(PieceType.KING, Color.BLACK))
    return board


def test_play_promotes_with_given_chooser():
    board = _promotion_board()
    play(board, ["a7 a8"], io.StringIO(), lambda: "N")
    assert board.piece_at(7, 0) == Piece(PieceType.KNIGHT, Color.WHITE)


def test_play_reads_promotion_choice_from_input():
    board = _promotion_board()
    out = io.StringIO()
    play(board, ["a7 a8", "R"], out)
    assert board.piece_at(7, 0) == Piece(PieceType.ROOK, Color.WHITE)
    assert "폰이 승급할 수 있습니다." in out.getvalue()


def test_play_ends_when_king_is_captured():
    board = ChessBoard.empty()
    board.place(0, 4, Piece(PieceType.KING, Color.WHITE))
    board.place(6, 3, Piece(PieceType.QUEEN, Color.WHITE))
    board.place(7, 4, Piece(PieceType.KING, Color.BLACK))
    out = io.StringIO()
    assert play(board, ["d7 e8", "e1 e2"], out) is Color.WHITE
    assert board.game_over
    assert board.current_turn is Color.WHITE
    assert "킹이 잡혔습니다! 흰색의 승리입니다!" in out.getvalue()
    assert board.piece_at(0, 4) == Piece(PieceType.KING, Color.WHITE)


def test_play_reports_stalemate_when_opponent_cannot_move():
    board = ChessBoard.empty()
    board.place(0, 4, Piece(PieceType.KING, Color.WHITE))
    out = io.StringIO()
    assert play(board, ["e1 e2"], out) is None
    assert board.game_over
    assert "스테일메이트! 무승부입니다." in out.getvalue()


def test_play_renders_board_without_colour_for_plain_streams():
    out = io.StringIO()
    play(ChessBoard(), [], out)
    text = out.getvalue()
    assert text.startswith(ChessBoard().render())
    assert "\x1b[" not in text


def test_main_prints_intro_and_plays(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("e2 e4\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("체스 게임을 시작합니다!\n")
    assert "검은색의 차례입니다." in captured