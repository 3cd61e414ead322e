"""University portal backend package.

This package exposes the catalog and application-submission API used by
the portal frontend. It is intentionally lightweight; individual modules
contain the concrete implementations and documentation.
"""
