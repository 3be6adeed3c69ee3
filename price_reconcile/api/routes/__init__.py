"""
API Routes
==========

Route modules for the price-reconcile service.
"""

from price_reconcile.api.routes.reconcile import router as reconcile_router

__all__ = ["reconcile_router"]
