"""Domain layer — NID rules, types, and errors.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
