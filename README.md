# kchess

A chess game for two players at one terminal. The players take turns typing
moves. The game knows how every piece moves. It handles castling, en passant
and pawn promotion, and it detects check, checkmate and stalemate. The game's
prompts and messages are in Korean.

The package also has a small text animation of two cars racing.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
kchess
```

The board is printed with rank 8 at the top and White at the bottom. Pieces
are shown as the letters `P N B R Q K`, and empty squares as `.`. When the
output is a terminal, white pieces are shown bright and black pieces are
dimmed.

Enter each move as two squares separated by a space, for example:

```
e2 e4
```

Castling is entered as the king's move: `e1 g1` castles king-side and `e1 c1`
castles queen-side. When a pawn reaches the last rank, you are asked for `Q`,
`R`, `B` or `N`. Any other answer promotes to a queen. If a move is illegal or
a square cannot be read, the game says so and asks again.

The game ends on checkmate, on stalemate, or when a king is captured. It also
stops when the input runs out, so moves can be piped in from a file:

```
kchess < moves.txt
```

## Using the library

```python
from kchess.board import ChessBoard, IllegalMoveError
from kchess.pieces import Color

board = ChessBoard()
board.make_move(1, 4, 3, 4)               # e2 e4
print(board.render())
print(board.is_check(Color.BLACK))
```

Rows and columns count from 0. Row 0 is White's back rank and column 0 is the
a-file.

`ChessBoard` offers these methods:

- `make_move(from_row, from_col, to_row, to_col, choose_promotion=None)` plays
  a move for the side to move. It returns the captured piece, or `None` if
  nothing was captured. It raises `IllegalMoveError` if the move is not legal.
  `choose_promotion` is a function with no arguments that returns the
  promotion letter. Without it, a pawn promotes to a queen.
- `is_valid_move`, `is_check`, `is_checkmate` and `is_stalemate` check the
  position.
- `piece_at` and `place` read and set squares.
- `ChessBoard.empty()` returns a board with no pieces, and `copy()` returns an
  independent copy of a board.
- `render(colour=False)` returns the board as text.

`kchess.cli.parse_square("e2")` turns a square name into `(row, col)`.
`kchess.cli.play(board, lines, out)` runs the game loop over any iterable of
input lines and writes to any text stream.

## Car race

```
kchess-race
kchess-race --delay 0.1
```

This prints seven frames of two cars racing, one frame every half second by
default. `--delay` sets the seconds between frames.

## What it does not do

There is no computer opponent. Games cannot be saved or loaded, and no move
history is kept. Draws by repetition, by the fifty-move rule or by agreement
are not detected.