"""
Cross-cutting infrastructure: settings, logging, database access,
exceptions and sample data.
"""
