"""Command line interface for the videowall calculator."""
