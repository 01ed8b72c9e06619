"""Service layer — the command boundary, returning ServiceResult.

Services may import from domain, model, and storage.
They must never import from commands or output.
"""
