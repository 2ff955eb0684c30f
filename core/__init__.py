"""
Core package - Shared service base class and utilities.
"""
