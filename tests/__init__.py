"""
Test suite for treasury_calc

Contains:
- tests/unit/          : Unit tests for individual modules and the three calculation modes
"""
