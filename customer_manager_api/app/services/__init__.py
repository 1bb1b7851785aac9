"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through a repository, so the storage implementation can
be swapped without changing API handlers.
"""
