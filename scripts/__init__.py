"""Command-line entry points for delaunay_emst."""
