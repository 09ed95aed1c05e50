"""
Test suite for the capability registry.
"""
