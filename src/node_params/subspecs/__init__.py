"""Sub-specifications for the individual node parameter concerns."""
