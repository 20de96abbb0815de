"""
Print the energy of every pixel of an image, optionally saving a heatmap.

Usage:
    python print_energy.py --image demo.png [--plot energy.png]
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend

from seamcarver import SeamCarver
from seamcarver.io import load_image, render_energy


def main():
    parser = argparse.ArgumentParser(description="Print the energy map of an image")
    parser.add_argument('--image', default='demo.png', help="Path to the image")
    parser.add_argument('--plot', default=None, help="Also save the energy map to this PNG")
    args = parser.parse_args()

    picture = load_image(args.image)
    print(f"Image is {picture.width} pixels wide by {picture.height} pixels high.")

    carver = SeamCarver(picture)
    print("Printing energy calculated for each pixel.")
    for row in range(carver.height):
        print(" ".join(f"{carver.energy(col, row):9.2f}" for col in range(carver.width)))

    if args.plot:
        render_energy(carver.energy_map, args.plot, title=os.path.basename(args.image))
        print(f"Saved: {args.plot}")


if __name__ == '__main__':
    main()
