"""Infrastructure layer — the graph engine.

This layer depends on stdlib and third-party libs (NetworkX, structlog).
It may import domain types and errors, but never services, commands, or output.
"""
