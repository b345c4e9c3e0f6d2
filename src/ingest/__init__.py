"""Input side of the conversion pipeline.

This package detects input formats and parses source files into
immutable employee records for the store layer.
"""
