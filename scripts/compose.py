#!/usr/bin/env python
from __future__ import annotations

import argparse

from kodak.io.config import load_config
from kodak.io.png import load_png, save_png
from kodak.core.pipeline import run_steps


def parse_args():
    p = argparse.ArgumentParser(description='Load a PNG, apply the configured steps and save the result')
    p.add_argument('config', help='Path to the pipeline JSON (input, output, steps)')
    p.add_argument('-o', '--out', default=None, help='Override the output path from the config')
    p.add_argument('--preview', default=None, help='Also save a matplotlib preview figure here')
    return p.parse_args()


def main():
    args = parse_args()
    cfg = load_config(args.config)
    img = load_png(cfg.input)
    print(f"Loaded {cfg.input}: {img.width}x{img.height}, {len(cfg.steps)} step(s)")

    result = run_steps(img, cfg.steps)
    out = save_png(result, args.out or cfg.output)
    print(f"Saved {result.width}x{result.height} image to {out}")

    if args.preview:
        import matplotlib
        matplotlib.use('Agg')
        from kodak.viz.preview import plot_image

        fig, _ = plot_image(result, title=str(out))
        fig.savefig(args.preview)
        print(f"Preview saved to {args.preview}")


if __name__ == '__main__':
    main()
