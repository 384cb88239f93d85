"""Domain layer: error taxonomy, type descriptors and intervals (no I/O, no logging)."""
