"""
Shrink an image by removing vertical and/or horizontal seams.

Usage:
    python resize.py --input mountain.jpg --col 10 --row 0 --output out.jpg
"""

import argparse
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from seamcarver import SeamCarver
from seamcarver.io import load_image, save_image


def main():
    parser = argparse.ArgumentParser(description="Remove seams from an image")
    parser.add_argument('--input', default='mountain.jpg', help="Path to the image")
    parser.add_argument('--col', type=int, default=10, help="Number of columns to remove")
    parser.add_argument('--row', type=int, default=0, help="Number of rows to remove")
    parser.add_argument('--output', default='out.jpg', help="Path of the carved image")
    parser.add_argument('--quality', type=int, default=80, help="JPEG quality")
    args = parser.parse_args()

    carver = SeamCarver(load_image(args.input))
    print(f"The image '{args.input}' has {carver.height} rows and {carver.width} columns")

    start = time.perf_counter()
    for i in range(args.col):
        carver.remove_vertical_seam(carver.find_vertical_seam())
        print(f"Removed {i + 1} columns")

    for i in range(args.row):
        carver.remove_horizontal_seam(carver.find_horizontal_seam())
        print(f"Removed {i + 1} rows")

    save_image(carver.picture(), args.output, quality=args.quality)

    print(f"Output image '{args.output}' has {carver.height} rows and {carver.width} columns")
    print(f"Resize took {time.perf_counter() - start:.3f} seconds")


if __name__ == '__main__':
    main()
