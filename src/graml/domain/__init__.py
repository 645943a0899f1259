"""Domain layer — sections, collaborator protocols, and the graph injector.

This layer depends only on stdlib and ruamel.yaml.
It must never import from services, commands, output, or config.
"""
