"""Commented package visibility check for Java sources."""

__version__ = "0.3.0"
