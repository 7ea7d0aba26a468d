"""Use cases."""

from mbox2db.application.use_cases.convert_mbox import ConversionStats, ConvertMboxUseCase

__all__ = [
    "ConversionStats",
    "ConvertMboxUseCase",
]
