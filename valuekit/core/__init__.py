"""
Core value types, calendar arithmetic, and integer primitives.

This package contains self-contained building blocks with no I/O:
the Maybe option type and its algebra, Result, the bit-packed
GregorianDate, string parsers, and sequence operators.
"""
