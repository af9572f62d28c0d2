"""Marketplace chat & likes backend."""
