"""arithdemo: a tiny arithmetic demonstration program.

Adds two integers, sums a fixed list and applies a double-then-add-ten
transform, printing each result under a banner.

Usage:
    python -m arithdemo
"""
