"""Pretest probability (PTP) calculator for coronary artery disease."""

__version__ = "0.1.0"
