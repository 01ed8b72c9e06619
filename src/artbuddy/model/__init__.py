"""Model layer — the customer store, filtered views, selection, and preferences.

Depends on the domain layer. Must never import from services, storage,
commands, or output.
"""
