"""
Core arithmetic engine, value types, configuration and contracts.

This package has no dependencies on I/O or external services; every
operation works on in-memory limb sequences.
"""
