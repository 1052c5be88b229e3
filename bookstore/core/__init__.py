"""
Record models, field validators and line parsers.
"""
