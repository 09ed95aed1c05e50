"""
Shared helpers for the capability registry.
"""
