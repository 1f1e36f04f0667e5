"""
valuekit: Maybe/Result value algebra и bit-packed Gregorian calendar.

Публичный API собран в valuekit.core.
"""

__version__ = "0.1.0"
