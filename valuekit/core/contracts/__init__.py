"""
Contract Validation Module

JSON Schema контракты сохраняемых форм и кодек GregorianDate.
"""

from .codec import decode_gregorian_date, encode_gregorian_date
from .validators import (
    ContractValidator,
    GregorianDateValidator,
    SchemaLoader,
    validate_gregorian_date,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GregorianDateValidator",
    # Functions
    "validate_gregorian_date",
    "encode_gregorian_date",
    "decode_gregorian_date",
]
