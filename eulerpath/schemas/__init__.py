"""Packaged JSON schemas for eulerpath documents."""
