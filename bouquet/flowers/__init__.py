"""
Flower catalog.

Responsibilities:
- Load the canonical flower catalog from CSV into memory.
- Answer full-snapshot, lookup-by-id and name-search queries.
- Expose the catalog to the API as an injectable dependency.
"""
