"""
Test helper utilities for pathmaster testing.

This module provides reusable utilities for:
- Writing shell config fixtures
- Normalizing generated timestamps for comparison
"""
