"""
billdesk - client-side core of a small billing system.

Composes draft bills from a catalog, validates customer and item forms,
and talks to the billing REST API.
"""

__version__ = "0.1.0"
