"""
Test suite for numstr

Contains:
- tests/unit/          : Unit tests for individual modules
"""
