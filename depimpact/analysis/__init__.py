"""Batch analyses built on top of the graph engine."""
