"""Observability – structured logging for builders."""
