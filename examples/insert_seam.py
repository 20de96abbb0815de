"""
Enlarge an image by inserting vertical and/or horizontal seams.

Usage:
    python insert_seam.py --input boat.jpg --col 20 --row 0 --output out.jpg
"""

import argparse
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from seamcarver import SeamCarver
from seamcarver.io import load_image, save_image


def main():
    parser = argparse.ArgumentParser(description="Insert seams into an image")
    parser.add_argument('--input', default='boat.jpg', help="Path to the image")
    parser.add_argument('--col', type=int, default=20, help="Number of columns to insert")
    parser.add_argument('--row', type=int, default=0, help="Number of rows to insert")
    parser.add_argument('--output', default='out.jpg', help="Path of the enlarged image")
    parser.add_argument('--quality', type=int, default=80, help="JPEG quality")
    args = parser.parse_args()

    carver = SeamCarver(load_image(args.input))
    print(f"The image '{args.input}' has {carver.height} rows and {carver.width} columns")

    start = time.perf_counter()
    if args.col > 0:
        carver.insert_vertical_seams(args.col)
    if args.row > 0:
        carver.insert_horizontal_seams(args.row)

    save_image(carver.picture(), args.output, quality=args.quality)

    print(f"Output image '{args.output}' has {carver.height} rows and {carver.width} columns")
    print(f"Resize (insert seam) took {time.perf_counter() - start:.3f} seconds")


if __name__ == '__main__':
    main()
