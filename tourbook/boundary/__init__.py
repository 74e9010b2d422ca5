"""
Boundary layer for external system integrations.

Handles all interactions with the relational database: ORM models, CRUD
operations and connection management.
"""
