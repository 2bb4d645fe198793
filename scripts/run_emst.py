#!/usr/bin/env python3
"""
Alpha-bounded EMST script.

Reads a point file, triangulates it and prints the weight of the Euclidean
minimum spanning tree, or FAIL when a tree edge is longer than alpha.
"""

import argparse
import logging
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import delaunay_emst as de


def main(argv=None):
    """Main entry point for the EMST computation."""
    parser = argparse.ArgumentParser(
        description='Euclidean minimum spanning tree with a maximum edge length'
    )
    parser.add_argument(
        '--points',
        type=str,
        default='points.txt',
        help='Path to the point file, one (x,y) per line (default: points.txt)'
    )
    parser.add_argument(
        '--alpha',
        type=float,
        required=True,
        help='Maximum allowed length of a spanning tree edge'
    )
    parser.add_argument(
        '--max-print',
        type=int,
        default=10,
        help='Print the tree edges when there are at most this many points (default: 10)'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Optional PNG path for a plot of the triangulation and tree'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        points = de.io.read_points(args.points)
    except FileNotFoundError as exc:
        print(f"Error processing EMST: {exc}", file=sys.stderr)
        return 1

    pair = de.compute_delaunay(points)
    if pair is None:
        print("Error processing EMST: fewer than two distinct points", file=sys.stderr)
        return 1

    result = de.compute_mst(pair, args.alpha)

    if result.alpha_property_ok:
        print(result.total_weight)
        if len(points) <= args.max_print:
            for line in de.utils.format_mst_edges(result):
                print(line)
    else:
        print("FAIL")

    if args.plot:
        de.visualization.plot_triangulation(pair, args.plot, mst=result)
        print(f"Plot saved to: {args.plot}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
