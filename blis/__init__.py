"""blis - simple arithmetic calculator"""
__version__ = "0.1.0"

from blis.errors import ParseError, BadExpression, InvalidOperation, OperationBalance, PopFailure
from blis.parser import Parser, calculate

__all__ = [
    'ParseError', 'BadExpression', 'InvalidOperation', 'OperationBalance', 'PopFailure',
    'Parser', 'calculate', '__version__'
]
