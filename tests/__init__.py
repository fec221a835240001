"""
Test suite for iAlign

Contains:
- tests/unit/          : Unit tests for the fiscal calendar and contracts
"""
