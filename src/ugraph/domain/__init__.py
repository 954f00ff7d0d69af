"""Domain layer — nodes, edges, and the graph container.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
