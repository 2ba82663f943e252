"""Directive feed: parsing and dispatch."""

from .directives import DirectiveError, parse_directive
from .session import ContestSession, Step

__all__ = ["DirectiveError", "parse_directive", "ContestSession", "Step"]
