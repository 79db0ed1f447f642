#!/usr/bin/env python3
"""Command line demos for the queue backings and the stable merge."""
from __future__ import annotations

import argparse
import math
import operator
import sys
from typing import List, Optional, TextIO

import structlog

from queuekit.config import QueueConfig
from queuekit.logging_config import bind_command_context, clear_command_context, configure_logging
from queuekit.merging.merge_queues import merge_queues
from queuekit.performance.benchmark import BenchmarkConfig, QueueBenchmark
from queuekit.queue_manager import QueueBacking, create_queue

MAX_PI_DIGITS = 16
MERGE_INPUTS = ([4, 7, 2, 10], [3, 6, 8, 9, 5, 1])
ORDERS = {"greater": operator.gt, "less": operator.lt}

log = structlog.get_logger(__name__)


def pi_digits(count: int) -> List[int]:
    digits = str(math.pi).replace(".", "")
    return [int(d) for d in digits[:count]]


def _state(queue) -> str:
    return f"size: {queue.size()} | cap: {queue.capacity()}"


def run_queue_demo(num_elems: int, backing: str, config: Optional[QueueConfig] = None,
                   out: Optional[TextIO] = None) -> int:
    """Queue up the first ``num_elems`` digits of pi, then drain the queue."""
    out = out if out is not None else sys.stdout
    if num_elems > MAX_PI_DIGITS:
        out.write(f"ERROR: num_elems exceeds {MAX_PI_DIGITS}\n")
        return 1
    if num_elems < 0:
        out.write("ERROR: num_elems must not be negative\n")
        return 1

    q = create_queue(backing, int, config)
    if q is None:
        out.write("ERROR: cannot allocate memory to create a queue\n")
        return 1

    out.write(f"Queuing up the first {num_elems} significant digits of pi...\n\n")
    out.write(f"queue (q) created :: {_state(q)}\n\n")

    out.write("Attempt to peek front element of empty queue...\n")
    out.write(f"q.peek_front() returns `{q.peek_front()}`\n")

    for digit in pi_digits(num_elems):
        if not q.enqueue(digit):
            out.write("ERROR: cannot allocate memory to enqueue an element\n")
            q.destroy()
            return 1
        out.write(f"q.enqueue({digit}) :: front: {q.peek_front()} | {_state(q)}\n")
    out.write("\n")

    while not q.empty():
        out.write(f"front: {q.peek_front()} | {_state(q)} -- q.dequeue()\n")
        q.dequeue()
    out.write(f"\n{_state(q)}\n")

    out.write("Attempt to dequeue from empty queue...\n")
    out.write(f"q.dequeue() returns `{q.dequeue()}`\n")

    q.destroy()
    log.debug("queue demo finished", backing=backing, num_elems=num_elems)
    return 0


def run_merge_demo(order: str, backing: str, out: Optional[TextIO] = None) -> int:
    """Stable-merge the two sample queues under the chosen ordering."""
    out = out if out is not None else sys.stdout
    queues = []
    for values in MERGE_INPUTS:
        q = create_queue(backing, int)
        if q is None:
            out.write("ERROR: cannot allocate memory to create a queue\n")
            return 1
        for value in values:
            q.enqueue(value)
        queues.append(q)
    q1, q2 = queues

    out.write("q1 : ")
    q1.print(out)
    out.write("q2 : ")
    q2.print(out)

    out.write("merging q1 and q2...\n")
    merged = merge_queues(q1, q2, ORDERS[order])
    out.write("q  : ")
    merged.print(out)

    q1.destroy()
    q2.destroy()
    merged.destroy()
    log.debug("merge demo finished", backing=backing, order=order)
    return 0


def run_bench(sizes: List[int], iterations: int, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    bench = QueueBenchmark()
    failed = False
    for name in bench.registry.list_backings():
        result = bench.run_benchmark(BenchmarkConfig(backing=name, test_sizes=sizes,
                                                     iterations=iterations))
        if result.error_message:
            out.write(f"{name}: FAILED ({result.error_message})\n")
            failed = True
            continue
        for stats in result.get_summary_statistics().values():
            timing = stats["execution_time"]
            out.write(
                f"{name} n={stats['input_size']}: "
                f"mean={timing['mean']:.6f}s median={timing['median']:.6f}s\n"
            )
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Queue backing and merge demos.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--log-format", default=None, choices=["keyvalue", "json", "console"])
    backings = [b.value for b in QueueBacking]
    sub = parser.add_subparsers(dest="command", required=True)

    queue_cmd = sub.add_parser("queue", help="Enqueue and drain the digits of pi")
    queue_cmd.add_argument("num_elems", type=int, help=f"Number of digits (<= {MAX_PI_DIGITS})")
    queue_cmd.add_argument("--backing", choices=backings, default=QueueBacking.ARRAY.value)
    queue_cmd.add_argument("--initial-capacity", type=int, default=None)
    queue_cmd.add_argument("--growth-factor", type=int, default=None)

    merge_cmd = sub.add_parser("merge", help="Stable-merge two sample queues")
    merge_cmd.add_argument("--order", choices=sorted(ORDERS), default="greater")
    merge_cmd.add_argument("--backing", choices=backings, default=QueueBacking.ARRAY.value)

    bench_cmd = sub.add_parser("bench", help="Benchmark the queue backings")
    bench_cmd.add_argument("--sizes", type=int, nargs="+", default=[1000, 10000])
    bench_cmd.add_argument("--iterations", type=int, default=3)
    return parser


def _config_from_args(args: argparse.Namespace) -> Optional[QueueConfig]:
    if args.initial_capacity is None and args.growth_factor is None:
        return None
    base = QueueConfig.from_env()
    return QueueConfig(
        initial_capacity=base.initial_capacity if args.initial_capacity is None else args.initial_capacity,
        growth_factor=base.growth_factor if args.growth_factor is None else args.growth_factor,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, fmt=args.log_format)
    bind_command_context(args.command, backing=getattr(args, "backing", None))

    try:
        if args.command == "queue":
            try:
                config = _config_from_args(args)
            except ValueError as err:
                parser.error(str(err))
            return run_queue_demo(args.num_elems, args.backing, config)
        if args.command == "merge":
            return run_merge_demo(args.order, args.backing)
        return run_bench(args.sizes, args.iterations)
    finally:
        clear_command_context()


if __name__ == "__main__":
    sys.exit(main())
