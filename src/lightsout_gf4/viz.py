import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from .board import BoardState
from .gf4 import GF4, gf4_symbol
from .weights import col_sums, row_sums

SUM_COLORS = {
    GF4.ZERO: "tab:gray",
    GF4.ONE: "tab:green",
    GF4.OMEGA: "tab:blue",
    GF4.OMEGA2: "tab:purple",
}


def show_board(
    board: BoardState,
    ax=None,
    cmap="Greys_r",
    border_color="orange",
    show_sums=None,
    title=None,
):
    """
    Draw the board with lit cells bright.

    In analysis mode the border ring is outlined and the GF(4) weighted sum
    of each row (right margin) and column (bottom margin) is written next to
    the grid. Pass show_sums=True to get the sums on a normal board too.
    """
    if show_sums is None:
        show_sums = board.analysis
    if ax is None:
        _, ax = plt.subplots(
            figsize=(0.45 * board.cols + 1.5, 0.45 * board.rows + 1.5)
        )

    ax.imshow(board.state.astype(float), cmap=cmap, vmin=0.0, vmax=1.0)

    for r in range(board.rows):
        for c in range(board.cols):
            if board.is_border_cell(r, c):
                ax.add_patch(
                    Rectangle(
                        (c - 0.5, r - 0.5),
                        1,
                        1,
                        edgecolor=border_color,
                        facecolor="none",
                        linewidth=1.5,
                    )
                )

    if show_sums:
        for r, s in enumerate(row_sums(board)):
            ax.text(
                board.cols, r, gf4_symbol(s),
                ha="center", va="center", color=SUM_COLORS[s],
            )
        for c, s in enumerate(col_sums(board)):
            ax.text(
                c, board.rows, gf4_symbol(s),
                ha="center", va="center", color=SUM_COLORS[s],
            )
        ax.set_xlim(-0.5, board.cols + 0.5)
        ax.set_ylim(board.rows + 0.5, -0.5)

    ax.set_xticks(np.arange(board.cols))
    ax.set_yticks(np.arange(board.rows))
    ax.set_xlabel("col")
    ax.set_ylabel("row")
    if title is None:
        title = "Analysis" if board.analysis else "Lights Out"
    ax.set_title(title)
    return ax
