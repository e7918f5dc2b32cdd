#!/usr/bin/env python3
from __future__ import annotations

import argparse

import leaptime


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "leaptime[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "leaptime[diagnostics]"') from e


def sample_offsets(y0: int, y1: int, step_days: int):
    """(decimal years, TAI - UTC seconds) sampled every step_days from y0-01-01 to y1-01-01."""
    utc = leaptime.get_utc()
    start = leaptime.DateComponents(y0, 1, 1).mjd
    stop = leaptime.DateComponents(y1, 1, 1).mjd
    years, offsets = [], []
    for mjd in range(start, stop + 1, step_days):
        date = leaptime.AbsoluteDate.create_mjd_date(mjd, 0.0, utc)
        years.append(2000.0 + (mjd - 51544) / 365.25)
        offsets.append(-utc.offset_from_tai(date))
    return years, offsets


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Plot TAI - UTC from the offset table in use.")
    p.add_argument("--y0", type=int, default=1960, help="start year")
    p.add_argument("--y1", type=int, default=2030, help="end year")
    p.add_argument("--step", type=int, default=5, help="sampling step in days")
    p.add_argument("--out", default="tai_minus_utc.png", help="output image filename")
    p.add_argument("--show-leaps", action="store_true", help="mark the start of every table segment")
    args = p.parse_args(argv)

    if args.y1 <= args.y0:
        raise SystemExit("--y1 must be > --y0")

    np = _need_numpy()
    plt = _need_matplotlib()

    ys, offs = sample_offsets(args.y0, args.y1, args.step)
    ys = np.asarray(ys, dtype=float)
    offs = np.asarray(offs, dtype=float)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.step(ys, offs, where="post", linewidth=1.5, label="TAI - UTC")

    if args.show_leaps:
        utc = leaptime.get_utc()
        xs = [2000.0 + (o.mjd - 51544) / 365.25 for o in utc.utctai_offsets]
        xs = [x for x in xs if args.y0 <= x <= args.y1]
        for x in xs:
            ax.axvline(x, color="0.7", linewidth=0.6, zorder=0)

    ax.set_title("TAI - UTC (seconds)")
    ax.set_xlabel("Year")
    ax.set_ylabel("TAI - UTC (s)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
