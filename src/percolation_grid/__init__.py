"""
Percolation Grid - site percolation on square lattices.

This package provides tools for:
- An n-by-n site percolation model backed by union-find
- Monte-Carlo estimation of the percolation threshold
- YAML-driven threshold sweeps over grid sizes
"""

__version__ = "1.0.0"
