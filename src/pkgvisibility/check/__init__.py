"""Commented package visibility check."""

from pkgvisibility.check.pattern import DEFAULT_FORMAT, MarkerPattern, PatternConfigError
from pkgvisibility.check.verifier import CompilationUnit, VisibilityVerifier
from pkgvisibility.check.window import SearchWindow, StartFallback

__all__ = [
    "DEFAULT_FORMAT",
    "CompilationUnit",
    "MarkerPattern",
    "PatternConfigError",
    "SearchWindow",
    "StartFallback",
    "VisibilityVerifier",
]
