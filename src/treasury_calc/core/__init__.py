"""
Core math primitives, tax schedules, domain models, and contracts.

This package is independent of any data source or presentation layer: it
receives plain numbers and dates and returns immutable result records.
"""
