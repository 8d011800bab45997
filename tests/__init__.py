"""
Test suite for javalike

Contains:
- tests/unit/          : Unit tests for individual modules
"""
