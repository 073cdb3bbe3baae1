"""
Core package for the employment data dashboard.

Submodules provide dataset loading, filtering, aggregation, the HTTP API and
the Streamlit rendering helpers orchestrated by the top-level `app.py`.
"""
