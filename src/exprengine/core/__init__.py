"""Core utilities shared across syntax and runtime layers.

This package provides the pieces that both the syntax layer (conversion
to postfix) and the runtime layer (evaluation) depend on. By isolating
them here, we maintain a clean dependency graph:

    core <- syntax <- runtime

Exports:
    OPERATORS: Immutable operator table
    OperatorDescriptor: Precedence, associativity and arithmetic of one operator
    Associativity: LEFT or RIGHT grouping

Python 3.13+.
"""

from .operators import OPERATORS, Associativity, OperatorDescriptor

__all__ = ["OPERATORS", "Associativity", "OperatorDescriptor"]
