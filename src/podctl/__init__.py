"""podctl - pick a pod container from your kubeconfig and open a shell in it."""

from podctl.__version__ import __version__

__all__ = ["__version__"]
