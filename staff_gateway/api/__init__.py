"""
GraphQL API layer for Staff Gateway.

This package contains:
- types.py: GraphQL type definitions
- data_loaders.py: Batched department -> employees loading
- subscriptions.py: Subscription resolvers
- extensions.py: Request logging and error codes
- schema.py: Combined Strawberry schema
"""

from .schema import schema

__all__ = ["schema"]
