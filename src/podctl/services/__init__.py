"""Service layer for podctl."""
