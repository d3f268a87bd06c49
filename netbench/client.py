"""Closed-loop TCP latency benchmark client."""

import socket
import struct
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack
from dataclasses import dataclass, field

from netbench.framing import HEADER_SIZE, decode_length, encode_length, recv_exact, send_all


def _f32(value):
    return struct.unpack("<f", struct.pack("<f", value))[0]


def percentile_index(length, fraction):
    """Index into a sorted sample for ``fraction``, computed in single precision."""
    return int(_f32(_f32(length) * _f32(fraction)))


@dataclass
class BenchmarkResult:
    """Latencies in microseconds and totals from one run."""

    times: list = field(default_factory=list)
    num_clients: int = 0
    num_ops: int = 0
    total_ms: int = 0

    def __post_init__(self):
        self.times = sorted(self.times)

    def percentiles(self):
        """Return ``(percent, microseconds)`` pairs for 0, 10, ..., 100."""
        if not self.times:
            raise ValueError("no latencies recorded")
        length = len(self.times)
        middle = [(p, self.times[percentile_index(length, p / 100)]) for p in range(10, 100, 10)]
        return [(0, self.times[0]), *middle, (100, self.times[-1])]

    def ops_per_second(self):
        """Requested operations per wall-clock second, truncated."""
        seconds = _f32(_f32(self.total_ms) / _f32(1000.0))
        return int(_f32(_f32(self.num_ops) / seconds))

    def report(self):
        """Human-readable summary of the run."""
        lines = [f"{p}th percentile {v}us" for p, v in self.percentiles()]
        lines.append(
            f"[numClients={self.num_clients},numOps={self.num_ops},"
            f"totalTime={self.total_ms}ms, ops={self.ops_per_second()}/s]"
        )
        return "\n".join(lines)


def _exercise(conn, data_size, ops, index):
    request = encode_length(data_size) + bytes(data_size)
    times = []
    for op in range(ops):
        begin = time.perf_counter_ns() // 1000
        send_all(conn, request)
        print("wrote out")
        amount = decode_length(recv_exact(conn, HEADER_SIZE))
        if amount > data_size + HEADER_SIZE:
            raise ValueError(f"response of {amount} bytes exceeds buffer")
        recv_exact(conn, amount)
        times.append(time.perf_counter_ns() // 1000 - begin)
        if op % 10000 == 0:
            print(f"[{index}] {op}")
    return times


def run_client(address, data_size, num_ops, num_clients):
    """Run ``num_ops`` round trips split over ``num_clients`` connections."""
    ops_per_client = num_ops // num_clients
    print("Client operations:", ops_per_client)
    host, _, port = address.rpartition(":")
    endpoint = (host.strip("[]") or "localhost", int(port))

    with ExitStack() as stack:
        connections = []
        for _ in range(num_clients):
            conn = stack.enter_context(socket.create_connection(endpoint))
            conn.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            connections.append(conn)
        print(f"Connected to {num_clients} clients")

        start = time.monotonic_ns() // 1_000_000
        with ThreadPoolExecutor(max_workers=num_clients) as pool:
            futures = [
                pool.submit(_exercise, conn, data_size, ops_per_client, index)
                for index, conn in enumerate(connections)
            ]
            per_client = [future.result() for future in futures]
        end = time.monotonic_ns() // 1_000_000

    return BenchmarkResult(
        times=[t for latencies in per_client for t in latencies],
        num_clients=num_clients,
        num_ops=num_ops,
        total_ms=end - start,
    )


def main(argv=None):
    """Entry point: ``client ADDRESS DATA_SIZE NUM_OPS NUM_CLIENTS``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or args[0] != "client":
        return 0
    if len(args) < 5:
        raise SystemExit("usage: client ADDRESS DATA_SIZE NUM_OPS NUM_CLIENTS")
    print("Starting client")
    result = run_client(args[1], int(args[2]), int(args[3]), int(args[4]))
    print(result.report())
    return 0