"""Domain layer — adjacency types, parsing rules, and errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
