"""Command line interface for podctl."""
