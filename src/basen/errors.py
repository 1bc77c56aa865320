"""
basen 에러 정의
모든 에러는 BaseNError 하위 클래스이며, kind(ErrorKind)로 원인을 구분한다.
"""

from enum import Enum


class ErrorCategory(Enum):
    CONFIGURATION = "configuration"
    DOMAIN = "domain"
    RANGE = "range"
    FORMAT = "format"


class ErrorKind(Enum):
    # 생성 시점 (create)
    INVALID_CHARACTERS_TYPE = ("invalid characters type", ErrorCategory.CONFIGURATION)
    EMPTY_ALPHABET = ("empty alphabet", ErrorCategory.CONFIGURATION)
    EMPTY_SYMBOL = ("empty symbol", ErrorCategory.CONFIGURATION)
    INCONSISTENT_SYMBOL_LENGTH = ("inconsistent symbol length", ErrorCategory.CONFIGURATION)
    DUPLICATE_SYMBOL = ("duplicate symbol", ErrorCategory.CONFIGURATION)
    INVALID_BASE = ("invalid base", ErrorCategory.CONFIGURATION)
    INVALID_LENGTH = ("invalid length", ErrorCategory.CONFIGURATION)
    INVALID_MAX = ("invalid max", ErrorCategory.CONFIGURATION)
    CONFLICTING_OPTIONS = ("conflicting options", ErrorCategory.CONFIGURATION)
    # encode
    INVALID_VALUE_TYPE = ("invalid value type", ErrorCategory.DOMAIN)
    NEGATIVE_VALUE = ("negative value", ErrorCategory.DOMAIN)
    VALUE_OUT_OF_RANGE = ("value out of range", ErrorCategory.RANGE)
    # decode
    INVALID_INPUT_TYPE = ("invalid input type", ErrorCategory.DOMAIN)
    INVALID_INPUT_LENGTH = ("invalid input length", ErrorCategory.FORMAT)
    UNKNOWN_SYMBOL = ("unknown symbol", ErrorCategory.FORMAT)
    DECODED_VALUE_OUT_OF_RANGE = ("decoded value out of range", ErrorCategory.RANGE)

    def __init__(self, label: str, category: ErrorCategory):
        self.label = label
        self.category = category


class BaseNError(Exception):
    """basen 공통 에러. kind/category로 프로그램적으로 분기할 수 있다."""

    def __init__(self, kind: ErrorKind, message: str, **details):
        super().__init__(message)
        self.kind = kind
        self.details = details

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category


class ConfigurationError(BaseNError, ValueError):
    """create() 옵션 검증 실패"""


class EncodeTypeError(BaseNError, TypeError):
    """encode 입력이 정수가 아님"""


class DecodeTypeError(BaseNError, TypeError):
    """decode 입력이 문자열이 아님"""


class DomainError(BaseNError, ValueError):
    """encode 입력이 음수"""


class RangeError(BaseNError, ValueError):
    """표현 가능한 범위를 벗어남"""


class FormatError(BaseNError, ValueError):
    """decode 입력 형식 오류"""
