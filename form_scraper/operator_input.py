"""操作员输入：阻塞等待操作员的一次信号（按任意键）"""

import asyncio
import sys
from typing import Optional, TextIO


class OperatorSignal:
    """操作员信号的抽象，wait() 在收到一次信号后返回"""

    async def wait(self) -> None:
        raise NotImplementedError


class ImmediateSignal(OperatorSignal):
    """立即返回，用于测试或无人值守运行"""

    def __init__(self):
        self.calls = 0

    async def wait(self) -> None:
        self.calls += 1


class TerminalKeypress(OperatorSignal):
    """
    从控制终端读取一次按键（原始模式，不等回车）。
    没有超时，也不能取消。stdin 不是终端时退化为读取一行。
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdin

    async def wait(self) -> None:
        # 阻塞读取放到线程里，避免卡住事件循环
        await asyncio.to_thread(self._read_one)

    def _read_one(self) -> str:
        if not self.stream.isatty():
            return self.stream.readline()

        try:
            import msvcrt
        except ImportError:
            return self._read_posix()
        return msvcrt.getwch()

    def _read_posix(self) -> str:
        import termios
        import tty

        fd = self.stream.fileno()
        old_attrs = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return self.stream.read(1)
        finally:
            # 恢复终端模式
            termios.tcsetattr(fd, termios.TCSADRAIN, old_attrs)
