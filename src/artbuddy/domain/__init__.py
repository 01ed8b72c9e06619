"""Domain layer — values, entities, collections, and predicates.

This layer depends only on stdlib.
It must never import from model, services, storage, commands, or config.
"""
