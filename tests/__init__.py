"""
Test suite for dickson

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
