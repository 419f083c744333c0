"""Hangar: a registry service for ship records."""
