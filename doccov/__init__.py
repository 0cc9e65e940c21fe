"""Documentation Coverage.

Computes how much of a codebase is documented, from a snapshot of its
packages, types and members, with per-level coverage percentages.
"""

__version__ = "0.1.0"
