"""
Test suite for the arithmetic core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
