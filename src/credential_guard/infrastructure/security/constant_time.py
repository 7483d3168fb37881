"""Constant-time byte comparison primitive."""

from __future__ import annotations


def constant_time_equals(left: bytes, right: bytes) -> bool:
    """Compare two byte strings without short-circuiting on the first mismatch.

    Every overlapping position is visited and folded into one difference
    accumulator; the only branch on the outcome happens after the loop.
    """

    difference = len(left) ^ len(right)
    for left_byte, right_byte in zip(left, right):
        difference |= left_byte ^ right_byte
    return difference == 0
