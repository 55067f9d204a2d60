"""Safari / Chrome タイムスタンプ変換"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

# Safariエポック（2001年1月1日）とUnixエポック（1970年1月1日）の差（秒）
SAFARI_EPOCH_OFFSET = 978_307_200

# Unixエポック（1970年1月1日）とChromeエポック（1601年1月1日）の差（秒）
CHROME_EPOCH_OFFSET = 11_644_473_600


def from_safari(raw: Union[int, float]) -> datetime:
    """
    Safariのvisit_time（2001年1月1日からの秒数）をUTCのdatetimeに変換

    Args:
        raw: 2001年1月1日からの秒数（小数部は保持）

    Returns:
        タイムゾーン付き（UTC）のdatetime
    """
    return datetime.fromtimestamp(raw + SAFARI_EPOCH_OFFSET, tz=timezone.utc)


def to_chrome(t: datetime) -> int:
    """
    datetimeをChromeのvisit_time（1601年1月1日からのマイクロ秒）に変換

    切り捨てのみで丸めは行わない。naiveなdatetimeはUTCとして扱う。

    Args:
        t: 変換する日時

    Returns:
        1601年1月1日からのマイクロ秒
    """
    if t.tzinfo is None:
        t = t.replace(tzinfo=timezone.utc)
    return int((t.timestamp() + CHROME_EPOCH_OFFSET) * 1_000_000)
