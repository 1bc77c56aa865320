"""
basen: 임의 진법/문자집합 정수 인코더 (짧은 ID 생성용)
"""

from .codec import DEFAULT_CHARACTERS, MAX_SAFE_INTEGER, Codec, create
from .errors import (
    BaseNError,
    ConfigurationError,
    DecodeTypeError,
    DomainError,
    EncodeTypeError,
    ErrorCategory,
    ErrorKind,
    FormatError,
    RangeError,
)

__all__ = [
    "DEFAULT_CHARACTERS",
    "MAX_SAFE_INTEGER",
    "Codec",
    "create",
    "BaseNError",
    "ConfigurationError",
    "DecodeTypeError",
    "DomainError",
    "EncodeTypeError",
    "ErrorCategory",
    "ErrorKind",
    "FormatError",
    "RangeError",
]
