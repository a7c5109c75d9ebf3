#!/usr/bin/env python3
"""
Vector and rectangle helpers for 2D operations.

These are small, fast functions for the geometry used by the simulation.
"""


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def spans_overlap(a_start: float, a_len: float, b_start: float, b_len: float) -> bool:
    """True when [a_start, a_start+a_len] and [b_start, b_start+b_len] touch or overlap."""
    return a_start + a_len >= b_start and a_start <= b_start + b_len
