"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain and framework errors
are consistently translated into the JSON error envelope.
"""
