"""Domain layer — the shop network, its reduction, and the input format.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
