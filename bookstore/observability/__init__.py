"""
Logging and metrics for the bookstore loader.
"""
