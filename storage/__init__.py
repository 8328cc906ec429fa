"""
Storage Package.

Data access for the currency reference store.

Modules:
- repositories/: Data access layer
"""
