# netbench

netbench is a closed-loop benchmark client. It measures the request/response
latency and throughput of a TCP server that speaks a simple length-prefixed
protocol.

## Protocol

Each message is a 4-byte little-endian unsigned length followed by that many
bytes of payload. Over each connection the client sends one framed request,
waits for one framed reply, and then sends the next request. The request
payload is `data-size` zero bytes. A reply may not be longer than
`data-size + 4` bytes. A longer reply raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```
netbench client <address> <data-size> <num-ops> <num-clients>
```

- `address`: the server as `host:port`, for example `127.0.0.1:9000`. IPv6
  hosts may be given in brackets (`[::1]:9000`). An empty host means
  `localhost`.
- `data-size`: the number of payload bytes in each request.
- `num-ops`: the total number of operations. Each client runs
  `num-ops // num-clients` of them.
- `num-clients`: the number of concurrent connections. Each one has
  `TCP_NODELAY` set and runs in its own thread.

If the first argument is not `client`, the command does nothing and exits
with status 0. If `client` is given with fewer than four further arguments,
the command prints a usage message and exits.

While the benchmark runs, the command prints `wrote out` after every request
and `[<client>] <op>` every 10,000 operations. At the end it prints the
request latencies in microseconds at the 0th, 10th, …, 100th percentiles,
followed by a summary line:

```
[numClients=4,numOps=10000,totalTime=812ms, ops=12315/s]
```

Percentile positions and the operations-per-second figure are computed in
single-precision floating point and then truncated. The ops figure uses the
requested `num-ops`, not the number of operations actually completed.

## Library use

```python
from netbench.client import run_client

result = run_client("127.0.0.1:9000", data_size=64, num_ops=10000, num_clients=4)
print(result.report())
print(result.ops_per_second())
```

`run_client` returns a `BenchmarkResult` dataclass. Its fields are `times`
(all latencies in microseconds, sorted when the result is created),
`num_clients`, `num_ops` and `total_ms`. It has these methods:

- `percentiles()`: `(percent, microseconds)` pairs for 0, 10, …, 100. It
  raises `ValueError` if no latencies were recorded, which happens when
  `num_ops` is smaller than `num_clients`.
- `ops_per_second()`: the requested operations per wall-clock second.
- `report()`: the percentile lines and the summary line as one string.

`percentile_index(length, fraction)` gives the index into a sorted sample
that the report uses for each percentile.

`netbench.framing` handles the wire format:

- `send_all(conn, data)` writes the whole buffer, retrying on partial sends.
- `recv_exact(conn, size)` reads exactly `size` bytes. It raises
  `ConnectionError` if the peer closes the connection first.
- `encode_length(size)` returns the 4-byte header. It raises `ValueError`
  if `size` is outside `0..MAX_LENGTH` (`0xFFFFFFFF`).
- `decode_length(header)` reads the length from a header of exactly
  `HEADER_SIZE` (4) bytes. It raises `ValueError` for any other size.

## What it does not do

netbench is only a client. It provides no server to benchmark against. You
need a server that answers each framed request with one framed reply.

## Tests

```
pip install .[test]
pytest
```