"""Leak heuristics and listener reports."""
