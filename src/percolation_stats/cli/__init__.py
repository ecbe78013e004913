"""Command-line interface for percolation_stats."""
