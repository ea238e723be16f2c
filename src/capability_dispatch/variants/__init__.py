"""Concrete variants for the bundled drivers."""
