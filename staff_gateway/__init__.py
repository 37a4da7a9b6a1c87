"""
Staff Gateway - Employee & Department GraphQL Service

A small service exposing staff records with:
- GraphQL API for queries, mutations, and subscriptions
- Batched department -> employees resolution (no N+1 queries)
- Redis-based persistence
"""

__version__ = "0.1.0"
