"""react-setup -- interactive scaffolder for webpack + Babel React projects."""

__version__ = "0.1.0"
