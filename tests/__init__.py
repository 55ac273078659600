"""
Test suite for the order domain

Contains:
- tests/unit/          : Unit tests for value objects, the Order aggregate and host workflows
"""
