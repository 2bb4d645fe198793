#!/usr/bin/env python3
"""
Triangulation self-check script.

Triangulates a point file, verifies the Euler characteristic and the
Delaunay property, prints an estimated speedup of the divide-and-conquer
algorithm over a quadratic one, and finally computes the alpha-bounded
spanning tree.
"""

import argparse
import logging
import sys
import os
import time

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import delaunay_emst as de


def main(argv=None):
    """Main entry point for the triangulation check."""
    parser = argparse.ArgumentParser(
        description='Check a Delaunay triangulation and compute its EMST'
    )
    parser.add_argument(
        '--points',
        type=str,
        default='points.txt',
        help='Path to the point file (default: points.txt)'
    )
    parser.add_argument(
        '--generate',
        type=int,
        default=0,
        help='Write this many random points to --points first (default: 0, read existing file)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed used with --generate'
    )
    parser.add_argument(
        '--alpha',
        type=float,
        default=40.0,
        help='Maximum spanning tree edge length (default: 40)'
    )
    parser.add_argument(
        '--global-check',
        action='store_true',
        help='Also run the quadratic all-points Delaunay check (slow)'
    )
    parser.add_argument(
        '--compare-n',
        type=int,
        default=1_000_000,
        help='Input size for the complexity comparison (default: 1000000)'
    )
    parser.add_argument(
        '--ops-per-sec',
        type=float,
        default=1e9,
        help='Assumed operations per second (default: 1e9)'
    )
    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Optional PNG path for a plot of the triangulation and tree'
    )
    parser.add_argument(
        '--dpi',
        type=int,
        default=300,
        help='Figure DPI (default: 300)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable info logging from the checks'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    if args.generate > 0:
        args.points = de.io.generate_points_file(args.generate, args.points, seed=args.seed)
        print(f"Created '{args.points}' with {args.generate} points")

    try:
        points = de.io.read_points(args.points)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Loaded {len(points)} points from: {args.points}")

    print("Triangulation started")
    start = time.perf_counter()
    pair = de.compute_delaunay(points)
    elapsed = time.perf_counter() - start
    print(f"Triangulation ended ({elapsed:.3f} s)")

    if pair is None:
        print("Cannot check: fewer than two distinct points")
        return 1

    # Euler characteristic
    report = de.topology.check_euler_property(pair)
    print("\n--- Euler Characteristic Check ---")
    print(f"   Vertices (V): {report.vertices}")
    print(f"   Edges    (E): {report.edges}")
    print(f"   Faces    (F): {report.faces} (including infinite outer face)")
    print(f"   Formula     : {report.vertices} - {report.edges} + {report.faces} = {report.characteristic}")
    if report.is_valid:
        print("TOPOLOGY VALID: Euler characteristic is 2.")
    else:
        print(f"TOPOLOGY BROKEN: Euler characteristic is {report.characteristic} (should be 2).")

    # Delaunay property
    violations = de.topology.find_local_delaunay_violations(pair)
    internal = de.topology.count_internal_edges(pair) // 2
    if violations:
        print(f"\nLOCAL TEST FAILED: {len(violations)} violation(s)")
        for v in violations[:10]:
            print(f"   Triangle {v.triangle} contains neighbor point {v.point}")
    else:
        print(f"\nLOCAL TEST PASSED: verified {internal} internal edges.")

    if args.global_check:
        global_violations = de.topology.find_global_delaunay_violations(points, pair)
        if global_violations:
            print(f"GLOBAL TEST FAILED: {len(global_violations)} triangle(s) with a point inside")
        else:
            triangles = de.triangulation.triangulation_triangles(pair.left)
            print(f"GLOBAL TEST PASSED: verified {len(triangles)} triangles.")

    hull = de.geometry.compute_convex_hull(pair)
    hull_points = de.geometry.hull_vertices(pair)
    if hull is None:
        print(f"\nConvex hull: degenerate (collinear points, {len(hull_points)} boundary steps)")
    else:
        print(f"\nConvex hull: {len(hull_points)} vertices, area {hull.area:.3f}")

    # Complexity comparison
    cmp = de.utils.compare_complexity(args.compare_n, args.ops_per_sec)
    print(f"\n--- Performance Comparison (N = {args.compare_n}) ---")
    print(f"Algorithm 1 Operations: {cmp['ops1']:.0f}")
    print(f"Algorithm 2 Operations: {cmp['ops2']:.0f}")
    print(f"Estimated Time 1      : {cmp['time1']:.6f} seconds")
    print(f"Estimated Time 2      : {cmp['time2']:.6f} seconds")
    print(f"Speedup Factor        : {cmp['speedup']:.2f}x faster")

    # Spanning tree
    print("\nComputing the minimum spanning tree...")
    result = de.compute_mst(pair, args.alpha)
    print("Done")
    if result.alpha_property_ok:
        print("Alpha property respected")
        print(f"The total weight of the minimum spanning tree is: {result.total_weight}")
        if not de.topology.is_acyclic(result.edges):
            print("SPANNING TREE BROKEN: selected edges contain a cycle")
    else:
        print("Alpha property not respected")

    if args.plot:
        de.visualization.plot_triangulation(pair, args.plot, mst=result, dpi=args.dpi)
        print(f"Plot saved to: {args.plot}")

    return 0 if report.is_valid and not violations else 2


if __name__ == '__main__':
    sys.exit(main())
