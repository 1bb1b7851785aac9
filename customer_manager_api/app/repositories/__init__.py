"""
Data-access layer.

Repositories run SQL against the database and map rows to schema
objects.  They hold no business rules; those live in ``services``.
"""
