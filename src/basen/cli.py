"""
basen 커맨드라인 도구

사용법:
  basen encode 11
  basen decode a
  basen decode -a
  basen encode 11 --characters=a --characters=b
  basen encode 5 --length=3

'-'로 시작하는 인코딩 문자열(예: "-a", "--a")도 그대로 decode 할 수 있다.

환경 변수:
  BASEN_LOG_LEVEL  로그 레벨 (기본 WARNING)
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence

from .codec import create
from .errors import BaseNError, EncodeTypeError, ErrorKind

logger = logging.getLogger(__name__)

_COMMANDS = ("encode", "decode")
# 값을 하나 받는 옵션 ("--base 2" 형태도 허용)
_VALUE_OPTIONS = ("--characters", "--base", "--length", "--max")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="basen",
        description="Base-N 인코딩: encode(정수 -> 문자열) / decode(문자열 -> 정수)",
        allow_abbrev=False,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # 공통 옵션
    common = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    common.add_argument(
        "--characters",
        action="append",
        help="문자집합의 심볼 하나 (여러 번 지정, 순서대로 0, 1, 2...)",
    )
    common.add_argument("--base", type=int, help="진법 (문자집합 앞에서부터 잘라 씀)")
    common.add_argument("--length", type=int, help="고정 출력 길이 (심볼 개수)")
    common.add_argument("--max", type=int, help="표현할 최대값 (고정 길이를 자동 계산)")

    p_encode = sub.add_parser(
        "encode", parents=[common], allow_abbrev=False, help="정수를 문자열로 변환합니다"
    )
    p_encode.add_argument("value", help="0 이상의 정수")

    p_decode = sub.add_parser(
        "decode", parents=[common], allow_abbrev=False, help="문자열을 정수로 변환합니다"
    )
    p_decode.add_argument("text", help="인코딩된 문자열 ('-'로 시작해도 됨)")

    return parser


def _positional_last(argv: Sequence[str]) -> List[str]:
    """
    encode/decode 뒤의 첫 위치 인자를 "--" 뒤로 옮긴다.
    기본 문자집합의 63번 심볼이 '-'이므로 "-a" 같은 결과를 옵션으로 오인하지 않게 한다.
    """
    argv = list(argv)
    if not argv or argv[0] not in _COMMANDS or "--" in argv:
        return argv

    command, rest = argv[0], argv[1:]
    options = []
    i = 0
    while i < len(rest):
        token = rest[i]
        inline_value = "=" in token and token.split("=", 1)[0] in _VALUE_OPTIONS
        if token in ("-h", "--help") or inline_value:
            options.append(token)
        elif token in _VALUE_OPTIONS:
            options.extend(rest[i:i + 2])
            i += 1
        else:
            # 나머지 인자는 argparse가 그대로 판단
            return [command, *options, *rest[i + 1:], "--", token]
        i += 1
    return argv


def _parse_value(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise EncodeTypeError(
            ErrorKind.INVALID_VALUE_TYPE,
            f"value must be an integer, got {raw!r}",
            value=raw,
        ) from None


def run(args: argparse.Namespace) -> str:
    codec = create(
        characters=args.characters,
        base=args.base,
        length=args.length,
        max=args.max,
    )
    if args.command == "encode":
        return codec.encode(_parse_value(args.value))
    return str(codec.decode(args.text))


def main(argv: Optional[Sequence[str]] = None) -> int:
    level_name = os.environ.get("BASEN_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(_positional_last(argv))

    try:
        result = run(args)
    except BaseNError as e:
        logger.debug("%s failed: kind=%s details=%r", args.command, e.kind.name, e.details)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0
