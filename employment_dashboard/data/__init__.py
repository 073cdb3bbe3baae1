"""
Dataset loading, filtering, summary statistics and per-chart aggregations.
"""
