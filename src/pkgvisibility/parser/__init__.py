"""Java parsing, source text access and configuration file loading."""

from pkgvisibility.parser.java import JavaSyntaxError, JavaTreeBuilder
from pkgvisibility.parser.source import SourceText, SourceTooLargeError

__all__ = [
    "JavaSyntaxError",
    "JavaTreeBuilder",
    "SourceText",
    "SourceTooLargeError",
]
