"""Infrastructure layer — graph engine.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from domain, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
