"""Collection stream exercises.

Modules:
1. transforms - filtering, mapping and aggregating plain lists
2. employees - grouping and partitioning Employee records
"""

from __future__ import annotations
