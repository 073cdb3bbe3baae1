"""
FastAPI application exposing the filtered job listings and chart aggregates.
"""
