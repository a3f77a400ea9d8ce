"""
Kuji - deterministic pseudo-random value generation for property-based testing.

The public surface lives in kuji.gen.
"""

__version__ = "0.1.0"
