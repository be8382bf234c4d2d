"""Fuzz testing infrastructure for LSysEngine.

This package contains:
- shadow_expander: Naive recursive reference implementation for differential testing
- test_expander_oracle: Differential tests and a state machine against the shadow model

Python 3.13+.
"""
