"""Conditional symbology evaluation engine."""
