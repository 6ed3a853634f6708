#!/usr/bin/env python
from __future__ import annotations

import argparse

from kodak.io.config import parse_colour
from kodak.io.png import load_png, save_png


def parse_args():
    p = argparse.ArgumentParser(description='Put a solid border around a PNG image')
    p.add_argument('input', help='Source PNG')
    p.add_argument('output', help='Destination PNG')
    p.add_argument('-w', '--width', type=int, default=16, help='Border width in pixels')
    p.add_argument('-c', '--colour', default='white',
                   help='"black", "white" or r,g,b (default white)')
    return p.parse_args()


def main():
    args = parse_args()
    if args.width < 0:
        raise SystemExit('--width must be non-negative')
    colour = parse_colour(args.colour.split(',') if ',' in args.colour else args.colour)

    img = load_png(args.input)
    bordered = img.expand(args.width, colour)
    save_png(bordered, args.output)
    print(f"Saved {bordered.width}x{bordered.height} image to {args.output}")


if __name__ == '__main__':
    main()
