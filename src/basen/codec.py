"""
Base-N 인코딩/디코딩
임의의 문자 집합(다중 문자 심볼 포함)과 진법으로 정수 <-> 문자열 변환.
create()로 한 번 만들고 encode/decode를 반복 호출한다.
"""

import logging
from typing import Optional, Sequence

from .errors import (
    ConfigurationError,
    DecodeTypeError,
    DomainError,
    EncodeTypeError,
    ErrorKind,
    FormatError,
    RangeError,
)

logger = logging.getLogger(__name__)

# 기본 문자집합: 0-9, a-z, A-Z, _, - (64자)
DEFAULT_CHARACTERS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"

# IEEE double로 정확히 표현 가능한 최대 정수 (2^53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1


def _is_int(value) -> bool:
    # bool은 int의 하위 클래스이므로 제외
    return isinstance(value, int) and not isinstance(value, bool)


class Codec:
    """생성 후 변경 불가. 여러 스레드에서 공유해도 안전하다."""

    __slots__ = ("_characters", "_values", "_base", "_symbol_width", "_length")

    def __init__(self, characters: Sequence[str], length: Optional[int] = None):
        characters = tuple(characters)
        object.__setattr__(self, "_characters", characters)
        object.__setattr__(self, "_values", {symbol: i for i, symbol in enumerate(characters)})
        object.__setattr__(self, "_base", len(characters))
        object.__setattr__(self, "_symbol_width", len(characters[0]))
        object.__setattr__(self, "_length", length)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"Codec(base={self._base}, symbol_width={self._symbol_width}, "
            f"length={self._length})"
        )

    @property
    def characters(self) -> tuple:
        return self._characters

    @property
    def base(self) -> int:
        return self._base

    @property
    def symbol_width(self) -> int:
        return self._symbol_width

    @property
    def length(self) -> Optional[int]:
        """고정 길이(심볼 개수). 가변 길이면 None."""
        return self._length

    def encode(self, value: int) -> str:
        """정수 -> 문자열 (최상위 자리부터)"""
        if not _is_int(value):
            raise EncodeTypeError(
                ErrorKind.INVALID_VALUE_TYPE,
                f"value must be an integer, got {type(value).__name__}",
                value=value,
            )
        if value < 0:
            raise DomainError(
                ErrorKind.NEGATIVE_VALUE,
                f"value must be a non-negative integer, got {value}",
                value=value,
            )
        if value > MAX_SAFE_INTEGER:
            raise RangeError(
                ErrorKind.VALUE_OUT_OF_RANGE,
                f"value {value} exceeds the maximum safe integer {MAX_SAFE_INTEGER}",
                value=value,
            )

        digits = []
        num = value
        while True:
            num, digit = divmod(num, self._base)
            digits.append(self._characters[digit])
            if num == 0:
                break

        if self._length is not None:
            if len(digits) > self._length:
                raise RangeError(
                    ErrorKind.VALUE_OUT_OF_RANGE,
                    f"value {value} exceeds representable range for length "
                    f"{self._length} in base {self._base}",
                    value=value,
                    length=self._length,
                    base=self._base,
                )
            # 0번 심볼로 왼쪽 채움
            digits.extend([self._characters[0]] * (self._length - len(digits)))

        return "".join(reversed(digits))

    def decode(self, text: str) -> int:
        """문자열 -> 정수"""
        if not isinstance(text, str):
            raise DecodeTypeError(
                ErrorKind.INVALID_INPUT_TYPE,
                f"input must be a string, got {type(text).__name__}",
                text=text,
            )
        if not text:
            raise FormatError(
                ErrorKind.INVALID_INPUT_LENGTH,
                "cannot decode an empty string",
                text=text,
            )
        width = self._symbol_width
        if len(text) % width:
            raise FormatError(
                ErrorKind.INVALID_INPUT_LENGTH,
                f"input length {len(text)} is not a multiple of symbol width {width}",
                text=text,
                symbol_width=width,
            )

        num = 0
        for position, start in enumerate(range(0, len(text), width)):
            symbol = text[start:start + width]
            try:
                digit = self._values[symbol]
            except KeyError:
                raise FormatError(
                    ErrorKind.UNKNOWN_SYMBOL,
                    f"unknown symbol {symbol!r} at position {position}",
                    symbol=symbol,
                    position=position,
                ) from None
            num = num * self._base + digit
            if num > MAX_SAFE_INTEGER:
                raise RangeError(
                    ErrorKind.DECODED_VALUE_OUT_OF_RANGE,
                    f"decoded value of {text!r} exceeds the maximum safe integer "
                    f"{MAX_SAFE_INTEGER}",
                    text=text,
                )
        return num


def _resolve_characters(characters: Optional[Sequence[str]], base: Optional[int]) -> tuple:
    if characters is None:
        symbols = tuple(DEFAULT_CHARACTERS)
    else:
        # str 자체는 심볼 목록으로 받지 않는다
        if not isinstance(characters, (list, tuple)) or not all(
            isinstance(symbol, str) for symbol in characters
        ):
            raise ConfigurationError(
                ErrorKind.INVALID_CHARACTERS_TYPE,
                "`characters` option must be a list of strings",
                characters=characters,
            )
        if not characters:
            raise ConfigurationError(
                ErrorKind.EMPTY_ALPHABET,
                "`characters` option cannot be empty",
            )
        if not all(characters):
            raise ConfigurationError(
                ErrorKind.EMPTY_SYMBOL,
                "`characters` symbols must be non-empty strings",
            )
        width = len(characters[0])
        for symbol in characters:
            if len(symbol) != width:
                raise ConfigurationError(
                    ErrorKind.INCONSISTENT_SYMBOL_LENGTH,
                    f"`characters` options are of inconsistent length: "
                    f"`{symbol}` is not {width} characters long",
                    symbol=symbol,
                    expected=width,
                )
        seen = set()
        for symbol in characters:
            if symbol in seen:
                raise ConfigurationError(
                    ErrorKind.DUPLICATE_SYMBOL,
                    f"`characters` option contains duplicate symbol `{symbol}`",
                    symbol=symbol,
                )
            seen.add(symbol)
        symbols = tuple(characters)

    if base is not None:
        if not _is_int(base) or base < 2:
            raise ConfigurationError(
                ErrorKind.INVALID_BASE,
                "`base` option must be an integer of at least 2",
                base=base,
            )
        if base > len(symbols):
            raise ConfigurationError(
                ErrorKind.INVALID_BASE,
                f"`base` option {base} exceeds the {len(symbols)} available characters",
                base=base,
            )
        symbols = symbols[:base]

    if len(symbols) < 2:
        raise ConfigurationError(
            ErrorKind.INVALID_BASE,
            "`characters` option must contain at least 2 symbols",
            base=len(symbols),
        )
    return symbols


def _digits_needed(value: int, base: int) -> int:
    """value를 표현하는 데 필요한 최소 자릿수 (정수 연산만 사용)"""
    count = 1
    capacity = base
    while capacity <= value:
        capacity *= base
        count += 1
    return count


def _resolve_length(base: int, length: Optional[int], max_value: Optional[int]) -> Optional[int]:
    if length is not None and max_value is not None:
        raise ConfigurationError(
            ErrorKind.CONFLICTING_OPTIONS,
            "`length` and `max` options cannot be used together",
            length=length,
            max=max_value,
        )
    if length is not None:
        if not _is_int(length) or length < 1:
            raise ConfigurationError(
                ErrorKind.INVALID_LENGTH,
                "`length` option must be a positive integer",
                length=length,
            )
        return length
    if max_value is not None:
        if not _is_int(max_value) or max_value < 0:
            raise ConfigurationError(
                ErrorKind.INVALID_MAX,
                "`max` option must be a non-negative integer",
                max=max_value,
            )
        return _digits_needed(max_value, base)
    return None


def create(
    characters: Optional[Sequence[str]] = None,
    base: Optional[int] = None,
    length: Optional[int] = None,
    max: Optional[int] = None,
) -> Codec:
    """옵션 검증 후 Codec 생성. 잘못된 옵션은 ConfigurationError."""
    symbols = _resolve_characters(characters, base)
    fixed_length = _resolve_length(len(symbols), length, max)
    codec = Codec(symbols, fixed_length)
    logger.debug("created %r", codec)
    return codec
