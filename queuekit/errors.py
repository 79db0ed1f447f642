"""队列库的异常类型。

资源耗尽与空队列操作通过返回值报告；这里的异常只用于调用方违反约定的情况，
以及合并过程中无法继续分配内存的情况。
"""


class ContractViolationError(RuntimeError):
    """调用方违反了队列的使用约定（例如销毁后继续使用、重复销毁）。"""


class QueueAllocationError(MemoryError):
    """合并结果队列无法继续增长。

    属性:
        partial: 已经合并出的部分结果队列
    """

    def __init__(self, message: str, partial=None) -> None:
        super().__init__(message)
        self.partial = partial
