"""A top-down pygame arcade shooter in which you survive waves of homing enemies."""

__version__ = "0.1.0"