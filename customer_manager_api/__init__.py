"""
Top‑level package for the Customer Manager API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
