import argparse
import csv
import multiprocessing as mp
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

import numpy as np
import yaml

from lightsout_gf4.border import border_solution_space, fill_border_to_zero
from lightsout_gf4.evaluation.metrics import (
    border_on,
    residual_nonzero,
    zero_sum_ok,
)
from lightsout_gf4.game import Game

mp.freeze_support()

ROOT = Path(__file__).resolve().parents[1]

LAYOUTS = ("inner", "arbitrary")

FIELDNAMES = [
    "rows",
    "cols",
    "layout",
    "seed",
    "board_id",
    "interior_on",
    "filled",
    "free_vars",
    "border_on",
    "nonzero_sums",
    "zero_sum",
    "time_ms",
]


def parse_boards(cfg_boards):
    """Parse [rows, cols] pairs (or a bare int for square boards) from YAML."""
    parsed = []
    for item in cfg_boards:
        if isinstance(item, int):
            parsed.append((item, item))
        elif isinstance(item, (list, tuple)) and len(item) == 2:
            parsed.append((int(item[0]), int(item[1])))
        else:
            raise ValueError(f"Invalid board spec: {item}")
    return parsed


def _task_seed(base_seed: int, *coords: int) -> int:
    """Generate deterministic seed for each task."""
    ss = np.random.SeedSequence([int(base_seed)] + [int(c) for c in coords])
    return int(
        ss.generate_state(1, dtype=np.uint64)[0] & np.uint64((1 << 63) - 1)
    )


def make_jobs(boards, layouts, n_samples, batch_size, base_seed, randomize):
    for rows, cols in boards:
        for layout in layouts:
            if layout not in LAYOUTS:
                raise ValueError(f"Unknown layout: {layout}")
            for lo in range(0, n_samples, batch_size):
                yield {
                    "rows": rows,
                    "cols": cols,
                    "layout": layout,
                    "idx_lo": lo,
                    "idx_hi": min(lo + batch_size, n_samples),
                    "base_seed": base_seed,
                    "randomize_free": randomize,
                }


def _run_batch(job):
    """Generate boards for one batch and re-solve their borders."""
    rows_out = []
    layout_id = LAYOUTS.index(job["layout"])
    for board_id in range(job["idx_lo"], job["idx_hi"]):
        rng = np.random.default_rng(
            _task_seed(
                job["base_seed"], job["rows"], job["cols"], layout_id, board_id
            )
        )
        game = Game(job["rows"], job["cols"], analysis=True, rng=rng)
        if job["layout"] == "arbitrary":
            game.scramble_arbitrary()
        board = game.board

        start_time = time.perf_counter()
        filled = fill_border_to_zero(
            board, rng if job["randomize_free"] else None
        )
        time_ms = (time.perf_counter() - start_time) * 1000
        free_vars = border_solution_space(board)

        rows_out.append(
            {
                "rows": job["rows"],
                "cols": job["cols"],
                "layout": job["layout"],
                "seed": job["base_seed"],
                "board_id": board_id,
                "interior_on": board.interior().count_on(),
                "filled": int(filled),
                "free_vars": "" if free_vars is None else free_vars,
                "border_on": border_on(board),
                "nonzero_sums": residual_nonzero(board),
                "zero_sum": zero_sum_ok(board),
                "time_ms": time_ms,
            }
        )
    return rows_out


def run_pool(jobs, writer, workers):
    """Run jobs in parallel and write results as they complete."""
    ctx = mp.get_context("spawn")
    done = 0
    total_rows = 0
    failed = 0
    start_time = time.time()

    with ProcessPoolExecutor(max_workers=workers, mp_context=ctx) as ex:
        futures = [ex.submit(_run_batch, j) for j in jobs]
        for fut in as_completed(futures):
            rows = fut.result()
            writer.writerows(rows)
            done += 1
            total_rows += len(rows)
            failed += sum(1 for r in rows if not r["filled"])
            elapsed = time.time() - start_time
            print(
                f"\r[progress] {done}/{len(futures)} batches | "
                f"{total_rows:>7,} boards | unsolved: {failed} | "
                f"elapsed: {int(elapsed // 60)}m {int(elapsed % 60)}s",
                end="",
                flush=True,
            )
    print()
    return total_rows, failed


def main():
    n_cpus = os.cpu_count() or 1
    default_workers = max(n_cpus - 1, 1)

    ap = argparse.ArgumentParser(
        description="Fill analysis-mode borders for many random boards."
    )
    ap.add_argument(
        "--config",
        default=str(ROOT / "experiments" / "configs" / "border_sweep.yaml"),
    )
    ap.add_argument("--out", default=None, help="Output CSV path")
    ap.add_argument(
        "--workers", type=int, default=default_workers, help="Number of workers"
    )
    ap.add_argument(
        "--batch-size", type=int, default=50, help="Boards per batch"
    )
    args = ap.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)["experiment"]

    boards = parse_boards(cfg["boards"])
    layouts = list(cfg.get("layouts", LAYOUTS))
    randomize = bool(cfg.get("randomize_free", False))
    n_samples = int(cfg["initial_states"]["n_samples"])
    base_seed = int(cfg["initial_states"].get("seed", 0))
    out_dir = Path(cfg.get("output_dir", "results/runs"))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_csv = args.out or str(out_dir / "border_sweep.csv")

    jobs = list(
        make_jobs(boards, layouts, n_samples, args.batch_size, base_seed, randomize)
    )
    print(
        f"\nStarting {len(jobs):,} batches "
        f"({len(boards)} sizes x {len(layouts)} layouts) "
        f"with {args.workers} workers...\n"
    )

    start_time = time.time()
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        total, failed = run_pool(jobs, writer, workers=args.workers)

    elapsed = time.time() - start_time
    print(f"\nDone in {int(elapsed/60)}m {int(elapsed%60)}s")
    print(f"Boards: {total:,}  unsolved borders: {failed}")
    print(f"Output: {out_csv}\n")


if __name__ == "__main__":
    main()
