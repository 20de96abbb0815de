"""
Print the energy of every pixel with the vertical and horizontal seams marked.

Usage:
    python print_seam.py --image demo.png
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from seamcarver import SeamCarver
from seamcarver.io import load_image


def print_marked(carver: SeamCarver, is_marked):
    for row in range(carver.height):
        line = ""
        for col in range(carver.width):
            mark = "*" if is_marked(col, row) else " "
            line += f"{carver.energy(col, row):10.2f}{mark}"
        print(line)


def main():
    parser = argparse.ArgumentParser(description="Print seams over the energy map")
    parser.add_argument('--image', default='demo.png', help="Path to the image")
    args = parser.parse_args()

    picture = load_image(args.image)
    print(f"{args.image} ({picture.width}-by-{picture.height} image)")
    print()

    carver = SeamCarver(picture)

    vertical = carver.find_vertical_seam().tolist()
    print("Vertical seam:", vertical)
    print_marked(carver, lambda col, row: vertical[row] == col)
    print()

    horizontal = carver.find_horizontal_seam().tolist()
    print("Horizontal seam:", horizontal)
    print_marked(carver, lambda col, row: horizontal[col] == row)


if __name__ == '__main__':
    main()
