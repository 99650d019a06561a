"""Observability helpers for kubetree."""
