#!/usr/bin/env python3
"""Generate a random integer point file for benchmarking."""

import argparse
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import delaunay_emst as de


def main(argv=None):
    """Main entry point for point generation."""
    parser = argparse.ArgumentParser(
        description='Write random integer points, one (x,y) per line'
    )
    parser.add_argument('--size', type=int, default=5000,
                        help='Number of points (default: 5000)')
    parser.add_argument('--output', type=str, default='points.txt',
                        help='Output file; .txt is appended if missing (default: points.txt)')
    parser.add_argument('--low', type=int, default=0,
                        help='Smallest coordinate (default: 0)')
    parser.add_argument('--high', type=int, default=1000,
                        help='Largest coordinate (default: 1000)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed')

    args = parser.parse_args(argv)

    try:
        path = de.io.generate_points_file(args.size, args.output,
                                          low=args.low, high=args.high, seed=args.seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully created '{path}' with {args.size} points.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
