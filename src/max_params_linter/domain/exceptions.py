"""Exceptions raised outside the rule's pure decision logic."""


class MaxParamsError(Exception):
    """Base class for max-params errors."""


class InvalidOptionsError(MaxParamsError, ValueError):
    """Raw rule options do not match the option schema."""


class InvalidTreeError(MaxParamsError, ValueError):
    """A syntax tree node is not a usable ESTree mapping."""
