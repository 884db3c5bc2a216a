"""
Core domain models, mathematical primitives, and contracts.

This module contains the unit value types and everything they need that is
independent of external systems (databases, configuration sources, UIs).
"""
