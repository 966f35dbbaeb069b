"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security middleware
- Rate limiting
- Request timeout
- Logging configuration
"""
