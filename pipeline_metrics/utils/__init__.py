"""
Shared utilities - datetime arithmetic, statistics, error handling
"""
