"""Input discovery and parsing.

This package locates the latest monthly input file, parses it into a
table, and validates its schema before records are transformed.
"""
