from __future__ import annotations
from typing import Callable, Dict, List, Optional

from ..errors import UnsupportedPlatform
from ..models import ConnectionRecord
from .unix import parse as unix_parse
from .windows import parse as windows_parse

ParseStrategy = Callable[..., List[ConnectionRecord]]

PARSERS: Dict[str, ParseStrategy] = {
    "darwin": unix_parse,
    "linux": unix_parse,
    "win32": windows_parse,
}

def parser_for(platform: str) -> ParseStrategy:
    try:
        return PARSERS[platform]
    except KeyError:
        raise UnsupportedPlatform(platform) from None

def parse_output(output: str, platform: str,
                 on_skip: Optional[Callable[[str], None]] = None) -> List[ConnectionRecord]:
    return parser_for(platform)(output, on_skip=on_skip)
