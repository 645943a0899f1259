"""Infrastructure layer — NetworkX graph store and its JSON export.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from services, commands, or output.
"""
