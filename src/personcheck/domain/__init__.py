"""Domain layer: predicates, rule tags, records, and the Result type.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
