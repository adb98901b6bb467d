"""
Core integer sequence operations.

Every function here is deterministic, integer-only and free of I/O:
- `aggregates`: max / min / sum / floor average
- `search`: containment and binary-search lookups
- `edits`: reverse, concatenate, insert-at, remove-at
- `sequence`: validation guards and copy / fill / compare / sort helpers
"""
