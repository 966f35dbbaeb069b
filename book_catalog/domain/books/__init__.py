"""
Books bounded context: domain layer.
"""
