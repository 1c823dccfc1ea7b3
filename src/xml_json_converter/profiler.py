"""Performance profiler for conversion operations."""

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import psutil


@dataclass
class PerformanceMetrics:
    """Performance metrics for one conversion operation."""
    operation_name: str
    duration: float
    input_size: int
    output_size: int
    memory_start_mb: float
    memory_end_mb: float
    memory_peak_mb: float
    throughput_mbps: float


class PerformanceProfiler:
    """
    Records duration, memory and throughput of conversion operations.

    Memory is the resident set size of the current process, sampled with
    psutil at the start and end of each operation.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.peak_memory: float = 0.0
        self.input_size = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        The block may set ``profiler.output_size`` before it exits; the
        metrics are recorded even when the block raises.
        """
        self.start_profiling(operation_name, input_size)
        self.output_size = 0
        try:
            yield self
        finally:
            self.stop_profiling(self.output_size)

    def start_profiling(self, operation_name: str, input_size: int = 0) -> None:
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def stop_profiling(self, output_size: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of output data in bytes

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        duration = time.perf_counter() - self.start_time
        end_memory = self._current_memory_mb()
        self.peak_memory = max(self.peak_memory, end_memory)
        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0.0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=self.peak_memory,
            throughput_mbps=throughput
        )
        self.metrics_history.append(metrics)

        self.logger.debug(f"Performance Summary - {self.current_operation}: "
                          f"{duration * 1000:.2f}ms, {throughput:.2f} MB/s, "
                          f"memory {end_memory:.1f} MB")

        self.current_operation = None
        self.start_time = None
        return metrics

    def _current_memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.warning(f"Memory sampling failed: {e}")
            return 0.0

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        count = len(self.metrics_history)
        return {
            "total_operations": count,
            "total_duration": sum(m.duration for m in self.metrics_history),
            "total_input_bytes": sum(m.input_size for m in self.metrics_history),
            "total_output_bytes": sum(m.output_size for m in self.metrics_history),
            "average_throughput_mbps": sum(m.throughput_mbps for m in self.metrics_history) / count,
            "max_memory_peak_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                }
                for m in self.metrics_history
            ]
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.

        Args:
            format: Export format ("json", "csv", "summary")

        Returns:
            Formatted metrics string
        """
        if format == "json":
            return json.dumps([
                {
                    "operation": m.operation_name,
                    "duration": m.duration,
                    "input_size": m.input_size,
                    "output_size": m.output_size,
                    "memory_peak_mb": m.memory_peak_mb,
                    "throughput_mbps": m.throughput_mbps,
                }
                for m in self.metrics_history
            ], indent=2)

        elif format == "csv":
            lines = ["operation,duration,input_size,output_size,memory_peak_mb,throughput_mbps"]
            for m in self.metrics_history:
                lines.append(f"{m.operation_name},{m.duration},{m.input_size},{m.output_size},"
                             f"{m.memory_peak_mb},{m.throughput_mbps}")
            return "\n".join(lines)

        elif format == "summary":
            summary = self.get_performance_summary()
            if not summary["total_operations"]:
                return "Performance Summary:\n  Total Operations: 0"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Total Duration: {summary['total_duration']:.4f}s",
                f"  Total Input: {summary['total_input_bytes']} bytes",
                f"  Total Output: {summary['total_output_bytes']} bytes",
                f"  Average Throughput: {summary['average_throughput_mbps']:.2f} MB/s",
                f"  Max Memory Peak: {summary['max_memory_peak_mb']:.1f} MB",
            ]
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")
