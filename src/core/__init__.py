"""
Core mathematical primitives, result models, and contracts.

This module contains pure, stateless building blocks: generic ordering,
checked integer arithmetic, and the JSON contracts of their results.
"""
