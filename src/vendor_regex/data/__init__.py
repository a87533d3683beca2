"""Bundled collision data."""
