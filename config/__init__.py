"""
Configuration package for the capability registry.
"""
