"""
Test suite for the ordering & checked-arithmetic core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
