"""
fleetwatch - Vessel component hierarchy dashboard

Packages:
- components: hierarchy engine (tree building, filtering, session state)
- api: remote component API client and FastAPI routes
- ui: event bus and tree projection
"""

__version__ = "1.0.0"
