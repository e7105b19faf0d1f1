"""
Personal Finance Analytics - Source Package

Derives summary statistics, behavioral patterns and near-future projections
from a snapshot of dated financial transactions and savings goals.

DESIGN PRINCIPLES:
1. Inputs are read-only snapshots, passed explicitly
2. Money is Decimal end to end
3. Dates are calendar dates, converted once at the boundary
4. Degenerate input yields well-defined results, never a crash
5. Every output is recomputed; nothing is persisted
"""

__version__ = "1.0.0"
__author__ = "Personal Finance Analytics Team"
