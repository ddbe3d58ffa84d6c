"""Core building blocks shared across podctl."""
