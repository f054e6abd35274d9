"""Command-line interface for mst_engine."""
