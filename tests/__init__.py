"""
Test suite for mathtrig

Contains:
- tests/unit/          : Unit tests for numerics, function families,
                         registry, contracts and reference verification
"""
