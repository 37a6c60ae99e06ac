"""
Test suite for wgs84-intercept

Contains:
- tests/unit/          : Unit tests for individual modules
"""
