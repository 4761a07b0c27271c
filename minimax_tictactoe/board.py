from contextlib import contextmanager
from enum import Enum

BOARD_SIZE = 3  # fixed 3x3 grid

# all 8 winning lines: rows, columns, diagonals
WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Cell(Enum):
    """
    contents of one square; values are the symbols drawn on screen
    """
    EMPTY = ''
    HUMAN = 'O'      # human plays circles
    COMPUTER = 'X'   # computer plays crosses

    @property
    def opponent(self):
        if self is Cell.HUMAN:
            return Cell.COMPUTER
        if self is Cell.COMPUTER:
            return Cell.HUMAN
        raise ValueError("empty cell has no opponent")


class Board:
    """
    3x3 grid of cells, addressed by (row, col)
    """
    def __init__(self):
        self.size = BOARD_SIZE
        self._cells = [[Cell.EMPTY for _ in range(self.size)]
                       for _ in range(self.size)]

    @classmethod
    def from_rows(cls, rows):
        """
        build a board from symbol rows, e.g. ["XO ", " X ", "  O"];
        blanks, '.' and '' mean empty
        """
        board = cls()
        for r, row in enumerate(rows):
            for c, sym in enumerate(row):
                sym = sym.strip().upper() if isinstance(sym, str) else sym
                if sym in ('', '.', None, Cell.EMPTY):
                    continue
                board._cells[r][c] = sym if isinstance(sym, Cell) else Cell(sym)
        return board

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col) -> Cell:
        return self._cells[row][col]

    def is_empty(self, row, col) -> bool:
        """
        true if coords valid and cell blank
        """
        if self.in_bounds(row, col):
            return self._cells[row][col] is Cell.EMPTY
        return False

    def mark(self, row, col, player: Cell) -> bool:
        """
        place player mark on an empty cell; no-op (False) otherwise
        """
        if player is Cell.EMPTY or not self.is_empty(row, col):
            return False
        self._cells[row][col] = player
        return True

    @contextmanager
    def speculate(self, row, col, player: Cell):
        """
        mark a cell for the duration of the block, then clear it again
        """
        if not self.mark(row, col, player):
            raise ValueError(f"cannot speculate on ({row}, {col})")
        try:
            yield self
        finally:
            self._cells[row][col] = Cell.EMPTY

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self._cells for cell in row)

    def empty_cells(self):
        """
        empty (row, col) pairs in row-major order
        """
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self._cells[r][c] is Cell.EMPTY]

    def check_win(self, player: Cell) -> bool:
        """
        scan rows, cols, diags for 3 in a row
        """
        b = self._cells
        return any(all(b[r][c] is player for r, c in line) for line in WIN_LINES)

    def winning_line(self):
        # first completed line, whoever owns it
        b = self._cells
        for line in WIN_LINES:
            (r0, c0) = line[0]
            first = b[r0][c0]
            if first is not Cell.EMPTY and all(b[r][c] is first for r, c in line):
                return line
        return None

    def count(self, player: Cell) -> int:
        return sum(1 for row in self._cells for cell in row if cell is player)

    def rows(self):
        # immutable view for renderers and tests
        return tuple(tuple(row) for row in self._cells)

    def copy(self):
        new_board = Board()
        new_board._cells = [list(row) for row in self._cells]
        return new_board

    def reset(self):
        """
        clear every cell
        """
        for row in self._cells:
            for c in range(self.size):
                row[c] = Cell.EMPTY

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self):
        lines = []
        for r, row in enumerate(self._cells):
            lines.append(" | ".join(cell.value or ' ' for cell in row))
            if r < self.size - 1:
                lines.append("--+---+--")
        return "\n".join(lines)

    def __repr__(self):
        return "Board.from_rows(%r)" % (
            ["".join(cell.value or '.' for cell in row) for row in self._cells],)
