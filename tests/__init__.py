"""
Test suite for squares

Contains:
- tests/unit/          : Unit tests for individual modules
"""
