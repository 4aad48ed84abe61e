"""Core pack pipeline: collection, planning, naming and writing."""
