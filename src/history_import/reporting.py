"""Log and progress sinks used by the import engine.

The engine only talks to the two narrow interfaces below. No-op
implementations are the defaults, so library callers can ignore both.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from tqdm import tqdm


class LogSink(Protocol):
    """レベル付きメッセージの出力先（%形式の引数を受け取る）"""

    def info(self, msg: str, *args: Any) -> None: ...

    def warn(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class StepReporter(Protocol):
    """進捗の出力先"""

    def start(self, total: int) -> None: ...

    def advance(self, n: int = 1) -> None: ...

    def finish(self) -> None: ...


class NullLogSink:
    """何も出力しないLogSink"""

    def info(self, msg: str, *args: Any) -> None:
        pass

    def warn(self, msg: str, *args: Any) -> None:
        pass

    def error(self, msg: str, *args: Any) -> None:
        pass


class NullStepReporter:
    """何も表示しないStepReporter"""

    def start(self, total: int) -> None:
        pass

    def advance(self, n: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass


class LoggingLogSink:
    """標準loggingへ転送するLogSink"""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__.rpartition(".")[0])

    def info(self, msg: str, *args: Any) -> None:
        self.logger.info(msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self.logger.warning(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.logger.error(msg, *args)


class TqdmStepReporter:
    """
    tqdmのプログレスバーで進捗を表示するStepReporter

    Args:
        bar_format: tqdmのbar_format
        remainder_mark: 未完了部分の文字
        progress_mark: 完了部分の文字
        unit: 1ステップの単位名
    """

    def __init__(
        self,
        bar_format: Optional[str] = None,
        remainder_mark: str = "░",
        progress_mark: str = "█",
        unit: str = "step",
    ) -> None:
        self.bar_format = bar_format
        self.charset = remainder_mark + progress_mark
        self.unit = unit
        self._bar: Optional[tqdm] = None

    @property
    def position(self) -> int:
        return self._bar.n if self._bar is not None else 0

    def start(self, total: int) -> None:
        self._bar = tqdm(
            total=total,
            bar_format=self.bar_format,
            ascii=self.charset,
            unit=self.unit,
        )

    def advance(self, n: int = 1) -> None:
        if self._bar is not None:
            self._bar.update(n)

    def finish(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class TqdmLoggingHandler(logging.Handler):
    """プログレスバーを崩さないようにtqdm.write経由で出力するハンドラー"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record))
        except Exception:
            self.handleError(record)
