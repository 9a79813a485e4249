"""Domain layer — the literal containers.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
