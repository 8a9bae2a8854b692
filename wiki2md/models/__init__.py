"""Data models for conversion options and results."""

from wiki2md.models.conversion_options import ConversionOptions
from wiki2md.models.conversion_result import (
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    FailureKind,
)

__all__ = [
    'ConversionOptions',
    'ConversionResult',
    'ConversionSuccess',
    'ConversionFailure',
    'FailureKind',
]
