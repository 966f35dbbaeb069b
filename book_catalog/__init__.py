"""
Book Catalog: a small REST service for managing a catalog of books.

Application package root. This is a layered service using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: Book records identified by UUID with a unique ISBN.

Layers:
    - domain: Entities, ports (ABCs), errors. No framework imports.
    - application: Service, DTOs, mapper.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
