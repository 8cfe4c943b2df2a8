"""Result publishing.

This package hands aggregation tables to writers that persist them as
CSV files and chart images in the output directory.
"""
