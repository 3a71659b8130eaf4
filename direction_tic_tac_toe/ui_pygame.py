import logging
from typing import Final

import pygame

from direction_tic_tac_toe.board import Board
from direction_tic_tac_toe.coordinate import BOARD_SIZE
from direction_tic_tac_toe.ui import BoardDisplay

log = logging.getLogger(__name__)


class PygameBoardDisplay(BoardDisplay):
    """Mirrors the board in a window. Input still comes from the terminal."""

    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    CELL_SIZE: Final = WINDOW_SIZE // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)

    def __init__(self) -> None:
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font

    @property
    def opened(self) -> bool:
        return self._screen is not None

    def display(self, board: Board) -> None:
        if self._screen is None:
            self._open()

        # Window events are only drained here; the game loop blocks on the terminal.
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                log.info("Ignoring window close request, the game continues in the terminal")

        self._render(board)

    def close(self) -> None:
        if self._screen is None:
            return
        pygame.quit()
        self._screen = None

    def _open(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)
        self._font = pygame.font.SysFont(None, 96)

    # -----------------------------
    # Rendering
    # -----------------------------

    def _render(self, board: Board) -> None:
        assert self._screen is not None  # noqa: S101
        self._screen.fill(self.BG_COLOR)
        self._draw_grid(self._screen)
        self._draw_marks(self._screen, board)
        pygame.display.flip()

    def _draw_grid(self, screen: pygame.Surface) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.WINDOW_SIZE, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self, screen: pygame.Surface, board: Board) -> None:
        for index, cell in enumerate(board.cells):
            if cell is None:
                continue

            row, col = divmod(index, BOARD_SIZE)
            text = self._font.render(cell, True, self.X_COLOR if cell == "X" else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(
                center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
            )
            screen.blit(text, rect)
