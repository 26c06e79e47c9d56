"""Bundled data files for fpctl."""
