"""
Test suite for mass_units

Contains:
- tests/unit/          : Unit tests for individual modules
"""
