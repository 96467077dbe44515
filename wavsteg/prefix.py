"""Prefix function (Knuth-Morris-Pratt failure table) and string period."""

from __future__ import annotations

__all__ = ["prefix_function", "period"]


def prefix_function(s: str) -> list[int]:
    """Return, for each position, the length of the longest proper border of ``s[:i+1]``."""
    pi: list[int] = []
    for i, ch in enumerate(s):
        if i == 0:
            pi.append(0)
            continue
        j = pi[i - 1]
        while j and s[j] != ch:
            j = pi[j - 1]
        pi.append(j + 1 if s[j] == ch else 0)
    return pi


def period(s: str) -> int:
    """Return the length of the shortest period of ``s`` (0 for an empty string)."""
    pi = prefix_function(s)
    return len(s) - (pi[-1] if pi else 0)