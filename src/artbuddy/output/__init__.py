"""Rendering of service results for humans (Rich) and machines (JSON)."""
