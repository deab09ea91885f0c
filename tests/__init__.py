"""
Test suite for shamir-bigint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
