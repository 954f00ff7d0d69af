"""Infrastructure layer — file access.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
"""
