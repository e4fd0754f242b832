"""Diagnostics package.

- pretty_month: plain-text month grids (no extra dependencies)
- leap_barcode, daylight_curve: plots (require the diagnostics extra)
"""

__all__ = ["pretty_month", "leap_barcode", "daylight_curve"]


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fancal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fancal[diagnostics]"') from e
