#!/usr/bin/env python3
"""Test that the package can be imported."""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

try:
    import delaunay_emst as de
    print("✓ Package imported successfully!")
    print(f"Version: {de.__version__}")
    print(f"\nAvailable modules:")
    for module in ['geometry', 'triangulation', 'spanning', 'topology', 'io', 'visualization', 'utils']:
        print(f"  - {module}")

    # Triangulate a unit square
    pair = de.compute_delaunay([(0, 0), (1, 0), (0, 1), (1, 1)])
    result = de.compute_mst(pair)
    print(f"\nUnit square EMST weight: {result.total_weight:.2f}")

    print("\n✓ All imports successful!")

except Exception as e:
    print(f"✗ Import failed: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)
