"""Minesweeper board logic with save and load support."""

from __future__ import annotations

import configparser
import random
from dataclasses import dataclass
from enum import Enum, IntEnum

MAX_SIDE = 30
MIN_MINES = 2

_NEIGHBOUR_OFFSETS = ((0, -1), (-1, -1), (1, -1), (0, 1), (-1, 1), (1, 1), (1, 0), (-1, 0))

_COUNT_COLORS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "darkblue",
    5: "darkred",
    6: "turquoise",
    7: "black",
}


class CellState(IntEnum):
    """What a cell holds or shows; the values are stored in save files."""

    RED_MINE = 0
    GRAY_UNKNOWN = 1
    WHITE_EMPTY = 2
    BROWN_FLAG = 3
    GREEN_NEIGHBOUR = 4
    EXPLODED_MINE = 5


class Outcome(Enum):
    """State of a game."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class SettingsError(ValueError):
    """Raised for board settings that cannot be played."""


def validate_settings(rows: int, columns: int, mines: int) -> tuple[int, int, int]:
    """Check board settings and return them unchanged."""
    if not (1 <= rows <= MAX_SIDE and 1 <= columns <= MAX_SIDE):
        raise SettingsError("Rows and columns must be between 1 and 30")
    if not MIN_MINES <= mines <= MAX_SIDE * MAX_SIDE - 1:
        raise SettingsError("Number of mines is out of range")
    if rows * columns <= 3:
        raise SettingsError("You cannot play on such a small field!")
    if mines > rows * columns - 2:
        raise SettingsError(
            "You have chosen the 'number of mines' more than the number of cells "
            "in the field minus 2!"
        )
    return rows, columns, mines


def mine_text_color(count: int) -> str | None:
    """Return the text colour for a mine count, or None when nothing is shown."""
    if not count:
        return None
    return _COUNT_COLORS.get(count, "gray")


@dataclass(eq=False)
class Cell:
    """One square of the board."""

    row: int
    column: int
    visible: bool = False
    state_real: CellState = CellState.WHITE_EMPTY
    state_visible: CellState = CellState.GRAY_UNKNOWN
    shown: CellState = CellState.GRAY_UNKNOWN
    text: str = ""

    def _show(self, state: CellState, save: bool = True) -> None:
        self.shown = state
        self.text = "!" if state is CellState.BROWN_FLAG else ""
        if save:
            self.state_visible = state

    def _set_count_text(self, count: int) -> None:
        if count:
            self.text = str(count)

    def discover(self, mines_near: int) -> bool:
        """Reveal the cell; return True if it was hidden before."""
        if self.visible:
            return False
        self.visible = True
        self._show(self.state_real)
        if self.state_real not in (CellState.RED_MINE, CellState.EXPLODED_MINE):
            self._set_count_text(mines_near)
        return True


class Game:
    """A board, its mines and the rules for pressing cells."""

    def __init__(self, rows: int, columns: int, mine_count: int, rng=None) -> None:
        if rows < 1 or columns < 1:
            raise ValueError("board must have at least one row and column")
        if not 0 <= mine_count <= rows * columns - 1:
            raise ValueError("too many mines for the board")
        self.rows = rows
        self.columns = columns
        self.mine_count = mine_count
        self.cells = [[Cell(r, c) for c in range(columns)] for r in range(rows)]
        self.mines: list[Cell] = []
        self.visible_mines = False
        self.remaining = rows * columns
        self.outcome = Outcome.PLAYING
        self.highlighted: list[Cell] = []
        self._rng = rng if rng is not None else random.Random()

    def _cell(self, row: int, column: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError("cell is outside the board")
        return self.cells[row][column]

    def neighbours(self, cell: Cell) -> list[Cell]:
        """Return the hidden cells around a cell."""
        found = []
        for dr, dc in _NEIGHBOUR_OFFSETS:
            r, c = cell.row + dr, cell.column + dc
            if 0 <= r < self.rows and 0 <= c < self.columns:
                other = self.cells[r][c]
                if not other.visible:
                    found.append(other)
        return found

    @staticmethod
    def _count(cells: list[Cell], state: CellState, real: bool = True) -> int:
        return sum((c.state_real if real else c.state_visible) is state for c in cells)

    def _discover(self, cell: Cell, count: int) -> None:
        if cell.discover(count):
            self.remaining -= 1

    def _open(self, start: Cell) -> None:
        stack = [start]
        while stack:
            cell = stack.pop()
            if cell.visible or cell.state_visible is CellState.BROWN_FLAG:
                continue
            around = self.neighbours(cell)
            count = self._count(around, CellState.RED_MINE)
            self._discover(cell, count)
            if not count:
                stack.extend(reversed(around))

    def _open_table(self) -> None:
        for row in self.cells:
            for cell in row:
                self._discover(cell, self._count(self.neighbours(cell), CellState.RED_MINE))

    def _place_mines(self, picked: Cell) -> None:
        variants = [
            (r, c)
            for r in range(self.rows)
            for c in range(self.columns)
            if (r, c) != (picked.row, picked.column)
        ]
        size = len(variants)
        for _ in range(size):
            first = self._rng.randrange(size)
            second = self._rng.randrange(size)
            variants[first], variants[second] = variants[second], variants[first]
        for r, c in variants[: self.mine_count]:
            cell = self.cells[r][c]
            cell.state_real = CellState.RED_MINE
            self.mines.append(cell)

    def _restore_highlight(self) -> None:
        for cell in self.highlighted:
            if not cell.visible:
                overlay = cell.state_real is CellState.RED_MINE and self.visible_mines
                cell._show(CellState.RED_MINE if overlay else cell.state_visible, save=False)
        self.highlighted = []

    def _lose(self, mine: Cell) -> None:
        mine.state_real = CellState.EXPLODED_MINE
        self._open_table()
        self.outcome = Outcome.LOST

    def _win(self) -> None:
        self._open_table()
        self.outcome = Outcome.WON

    def press_left(self, row: int, column: int) -> Outcome:
        """Open a cell, placing the mines on the first press."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        picked = self._cell(row, column)
        self._restore_highlight()
        if not self.mines:
            self._place_mines(picked)
        if picked.state_real is CellState.RED_MINE and picked.state_visible is not CellState.BROWN_FLAG:
            self._lose(picked)
        elif not picked.visible:
            self._open(picked)
            if self.remaining == self.mine_count:
                self._win()
        return self.outcome

    def press_right(self, row: int, column: int) -> Outcome:
        """Toggle the flag on a hidden cell."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        picked = self._cell(row, column)
        self._restore_highlight()
        if not picked.visible:
            flagged = picked.state_visible is CellState.BROWN_FLAG
            picked._show(CellState.GRAY_UNKNOWN if flagged else CellState.BROWN_FLAG)
        if picked.state_real is CellState.RED_MINE and self.visible_mines:
            picked._show(CellState.RED_MINE, save=False)
        return self.outcome

    def press_mid(self, row: int, column: int) -> Outcome:
        """Open the neighbours of a numbered cell once enough flags are set."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        picked = self._cell(row, column)
        self._restore_highlight()
        expected = int(picked.text) if picked.text.isdigit() else 0
        if not expected:
            return self.outcome
        around = self.neighbours(picked)
        if self._count(around, CellState.BROWN_FLAG, real=False) == expected:
            mine = None
            for cell in around:
                if cell.state_visible is CellState.BROWN_FLAG:
                    continue
                if cell.state_real is CellState.RED_MINE:
                    mine = cell
                    break
                self._open(cell)
            if mine is not None:
                self._lose(mine)
            elif self.remaining == self.mine_count:
                self._win()
        else:
            for cell in around:
                if not cell.visible:
                    cell._show(CellState.GREEN_NEIGHBOUR, save=False)
            self.highlighted = around
        return self.outcome

    def toggle_visible_mines(self) -> bool:
        """Show or hide the placed mines; return whether they are shown."""
        self.visible_mines = not self.visible_mines
        for mine in self.mines:
            if self.visible_mines:
                mine._show(CellState.RED_MINE, save=False)
            else:
                mine._show(mine.state_visible)
        return self.visible_mines

    def save(self, path) -> None:
        """Write the board to an INI file."""
        parser = _new_parser()
        parser["General"] = {
            "rows": str(self.rows),
            "columns": str(self.columns),
            "cntMines": str(self.mine_count),
        }
        parser["Rest"] = {"cntRemainingCell": str(self.remaining)}
        for row in self.cells:
            for cell in row:
                parser[f"MineAt_{cell.row}_{cell.column}"] = {
                    "stateReal": str(int(cell.state_real)),
                    "stateVisible": str(int(cell.state_visible)),
                    "visible": str(cell.visible).lower(),
                    "text": cell.text,
                }
        parser["cntSettedMines"] = {"cntMines": str(len(self.mines))}
        for index, mine in enumerate(self.mines):
            parser[f"mines_{index}"] = {"y": str(mine.row), "x": str(mine.column)}
        parser["stateMines"] = {"visibleMines": str(self.visible_mines).lower()}
        with open(path, "w", encoding="utf-8") as handle:
            parser.write(handle)


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    return parser


def _uint(parser, section: str, key: str, default: int = 0) -> int:
    text = parser.get(section, key, fallback=None)
    if text is None:
        return default
    text = text.strip()
    return int(text) if text.isdigit() else 0


def _flag(parser, section: str, key: str) -> bool:
    return parser.get(section, key, fallback="false").strip().lower() == "true"


def load_game(path) -> Game:
    """Restore a board written by Game.save."""
    parser = _new_parser()
    if not parser.read(path, encoding="utf-8"):
        raise FileNotFoundError(path)
    rows = _uint(parser, "General", "rows")
    columns = _uint(parser, "General", "columns")
    game = Game(rows, columns, _uint(parser, "General", "cntMines"))
    game.remaining = _uint(parser, "Rest", "cntRemainingCell", rows * columns)
    for row in game.cells:
        for cell in row:
            section = f"MineAt_{cell.row}_{cell.column}"
            cell.state_real = CellState(_uint(parser, section, "stateReal"))
            cell.state_visible = CellState(_uint(parser, section, "stateVisible"))
            cell._show(cell.state_visible)
            cell.visible = _flag(parser, section, "visible")
            cell._set_count_text(_uint(parser, section, "text"))
    placed = _uint(parser, "cntSettedMines", "cntMines")
    if placed:
        for index in range(placed):
            section = f"mines_{index}"
            game.mines.append(game._cell(_uint(parser, section, "y"), _uint(parser, section, "x")))
        game.visible_mines = _flag(parser, "stateMines", "visibleMines")
        if game.visible_mines:
            for mine in game.mines[: game.mine_count]:
                mine._show(CellState.RED_MINE, save=False)
    return game