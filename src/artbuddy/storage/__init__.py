"""Storage layer — JSON persistence of the customer graph and user preferences.

Storage may import from domain and model. It must never import from
services, commands, or output.
"""
