"""
Price Reconcile
===============

Extraction reconciliation engine for supplier price lists.

Features:
- Header harmonization across pages with drifting column names
- Locale-tolerant price normalization to whole currency units
- Primary/fallback/manual field resolution per row
- Import readiness analysis with per-row diagnostics

"""

__version__ = "1.0.0"
