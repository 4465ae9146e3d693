"""Resolver package for GraphQL schema.

Each resolver is a plain function of the parent object (or ``info`` for root
fields) and the field arguments. The Strawberry types in ``..types``,
``..queries`` and ``..mutations`` map field names onto these functions, so a
resolver only runs when its field is part of the client's selection.
"""

# Intentionally empty; functions are defined in sibling modules.
