"""Utility functions for punktcore."""
