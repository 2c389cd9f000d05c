"""Adapters that drive the engine: console game and REST API."""
