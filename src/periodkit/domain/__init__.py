"""Domain layer — periods, units, and the unit registry.

This layer depends only on stdlib and pydantic.
It must never import from operations, adapters, commands, or config.
"""
