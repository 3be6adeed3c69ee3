"""
API Package
===========

FastAPI application exposing the reconciliation pipeline.
"""
