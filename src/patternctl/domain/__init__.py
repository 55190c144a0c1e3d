"""Domain layer: pattern mechanics, value types, and sample data.

This layer depends only on stdlib.
It must never import from services, exporters, commands, or config.
"""
