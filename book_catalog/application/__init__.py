"""
Application layer package.

Contains the services that orchestrate domain objects and ports.
This layer depends on domain ports, never on infrastructure.
"""
