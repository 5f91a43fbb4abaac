import logging


class Trace:
    """アルゴリズムの実行過程を人が読める形で記録する

    記録した各行はロガーにもDEBUGレベルで流す
    """

    def __init__(self, logger: logging.Logger | None = None):
        self._lines: list[str] = []
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def write(self, message: str) -> None:
        for line in message.splitlines() or [""]:
            self._lines.append(line)
            self._logger.debug(line)

    def section(self, title: str) -> None:
        self.write(f"--- {title} ---")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __str__(self) -> str:
        return "\n".join(self._lines) + ("\n" if self._lines else "")


def emit(trace: Trace | None, message: str) -> None:
    """traceが与えられているときだけ記録する"""
    if trace is not None:
        trace.write(message)
