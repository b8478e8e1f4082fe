"""KodeX - private component library bundler."""

from kodex.__version__ import __version__

__all__ = ["__version__"]
