"""Terminal tic-tac-toe played with directional input such as "top-left"."""
