"""
Domain layer package.

Contains pure business objects: entities, errors and port interfaces.
No framework imports, no IO, no side effects.
"""
