"""
Test suite for radix-digits

Contains:
- tests/unit/          : Unit tests for individual modules
"""
