"""Bundled word packs and their registry."""
