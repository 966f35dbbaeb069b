"""
Application layer for the books bounded context.
"""
