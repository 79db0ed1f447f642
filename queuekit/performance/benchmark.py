"""
队列后端性能基准测试

对每种队列后端测量"全部入队再全部出队"的耗时，并用 NumPy 生成测试数据、
汇总统计结果。
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np

from ..config import QueueConfig
from ..queue_manager import QueueRegistry, get_queue_registry


class BenchmarkStatus(Enum):
    """基准测试状态"""
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class BenchmarkConfig:
    """基准测试配置"""
    backing: str
    test_sizes: List[int]
    iterations: int = 3
    warmup_iterations: int = 1
    seed: Optional[int] = None
    queue_config: Optional[QueueConfig] = None


@dataclass
class PerformanceMetrics:
    """单次测量的性能指标"""
    backing: str
    input_size: int
    execution_time: float
    peak_capacity: int
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # 每秒完成的入队+出队次数
        if self.throughput is None and self.execution_time > 0:
            self.throughput = 2 * self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """基准测试结果"""
    config: BenchmarkConfig
    status: BenchmarkStatus
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """按输入规模汇总耗时与吞吐量"""
        summary: Dict[str, Any] = {}
        for size in sorted({m.input_size for m in self.metrics}):
            group = [m for m in self.metrics if m.input_size == size]
            times = np.array([m.execution_time for m in group])
            size_summary = {
                "input_size": size,
                "sample_count": len(group),
                "execution_time": {
                    "mean": float(times.mean()),
                    "median": float(np.median(times)),
                    "std": float(times.std(ddof=1)) if len(times) > 1 else 0.0,
                    "min": float(times.min()),
                    "max": float(times.max()),
                },
            }
            throughputs = np.array([m.throughput for m in group if m.throughput])
            if throughputs.size:
                size_summary["throughput"] = {
                    "mean": float(throughputs.mean()),
                    "median": float(np.median(throughputs)),
                }
            summary[f"size_{size}"] = size_summary
        return summary


class QueueBenchmark:
    """队列后端基准测试"""

    def __init__(self, registry: Optional[QueueRegistry] = None):
        self.logger = logging.getLogger(__name__)
        self.registry = registry or get_queue_registry()

    def run_benchmark(self, config: BenchmarkConfig) -> BenchmarkResult:
        """
        运行单个后端的基准测试

        Args:
            config: 测试配置

        Returns:
            测试结果；任何一次测量失败都会把状态置为 FAILED
        """
        result = BenchmarkResult(config=config, status=BenchmarkStatus.COMPLETED)
        rng = np.random.default_rng(config.seed)

        try:
            self.logger.info(f"开始基准测试: {config.backing}")
            for size in config.test_sizes:
                data = rng.integers(0, max(size, 1) * 2, size).tolist()
                for _ in range(config.warmup_iterations):
                    self._measure(config, data)
                for _ in range(config.iterations):
                    result.metrics.append(self._measure(config, data))
            self.logger.info(f"基准测试完成: {config.backing}")
        except (KeyError, MemoryError, RuntimeError) as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"基准测试失败: {config.backing} - {e}")

        return result

    def run_comparative_benchmark(self, test_sizes: List[int], iterations: int = 3,
                                  seed: Optional[int] = None) -> Dict[str, BenchmarkResult]:
        """对所有已注册后端运行同一组测试"""
        return {
            name: self.run_benchmark(BenchmarkConfig(
                backing=name, test_sizes=test_sizes, iterations=iterations, seed=seed))
            for name in self.registry.list_backings()
        }

    def _measure(self, config: BenchmarkConfig, data: List[int]) -> PerformanceMetrics:
        queue = self.registry.create_queue(config.backing, int, config.queue_config)
        if queue is None:
            raise MemoryError(f"无法创建 {config.backing} 队列")
        try:
            start = time.perf_counter()
            for value in data:
                if not queue.enqueue(value):
                    raise MemoryError("入队时内存不足")
            capacity = queue.capacity()
            while queue.dequeue():
                pass
            elapsed = time.perf_counter() - start
        finally:
            queue.destroy()

        return PerformanceMetrics(
            backing=config.backing,
            input_size=len(data),
            execution_time=elapsed,
            peak_capacity=capacity,
        )
