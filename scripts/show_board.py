import argparse

import matplotlib.pyplot as plt
import numpy as np

from lightsout_gf4.border import border_solution_space
from lightsout_gf4.game import Game
from lightsout_gf4.viz import show_board


def main():
    ap = argparse.ArgumentParser(
        description="Plot a scrambled game next to its analysis board."
    )
    ap.add_argument("rows", type=int)
    ap.add_argument("cols", type=int)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--out", default=None, help="Save the figure here")
    args = ap.parse_args()

    game = Game(args.rows, args.cols, rng=np.random.default_rng(args.seed))
    normal = game.board.copy()
    game.enter_analysis()

    free = border_solution_space(game.board)
    print(game.board)
    print(f"free border variables: {free}")

    _, axes = plt.subplots(1, 2, figsize=(9, 4.5), constrained_layout=True)
    show_board(normal, ax=axes[0], show_sums=True)
    show_board(game.board, ax=axes[1])
    if args.out:
        plt.savefig(args.out)
    else:
        plt.show()


if __name__ == "__main__":
    main()
