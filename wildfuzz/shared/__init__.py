"""Helpers shared by the matching and catalog packages."""
