# sigtalk

sigtalk passes text from one process to another using only the two user
signals. Each byte is sent as eight signals, most significant bit first:
`SIGUSR1` stands for a 1 and `SIGUSR2` for a 0. Text is sent as UTF-8. The
server puts the bits back together, writes each finished byte to standard
output, and answers every signal it gets with `SIGUSR1`.

The server waits for signals with `signal.sigwaitinfo`, so it needs a system
that provides it, such as Linux. The client needs only `os.kill` and the user
signals.

## Installing

```
pip install .
```

## Running

Start the server. It prints its process id on a line of its own and then
writes out whatever it receives. Stop it with Ctrl-C.

```
sigtalk-server
```

From another terminal, send it a message:

```
sigtalk-client <pid> "hello there"
```

The client takes exactly two arguments, the server's pid and the message.

- With any other number of arguments it prints `Usage: ./client <pid> <msg>`
  to standard error and exits with status 1.
- The pid is read like C's `atoi`: leading whitespace and one sign are
  allowed, and reading stops at the first non-digit. If the result is not
  positive it prints `Invalid PID` and exits with status 1.
- If the process cannot be signalled it prints `Cannot signal process <pid>: ...`
  and exits with status 1.

The client waits one millisecond after each signal and prints
`Received ACK from server.` each time an acknowledgement arrives.

Both commands can also be started as `python -m sigtalk.server` and
`python -m sigtalk.client <pid> <msg>`.

## Using it from Python

```python
from sigtalk.protocol import encode_message, BitDecoder

decoder = BitDecoder()
received = bytearray()
for signo in encode_message("hi"):
    byte = decoder.feed(signo)
    if byte is not None:
        received.append(byte)
assert received == b"hi"
```

`sigtalk.protocol`:

- `encode_char(c)` gives the eight signals for one byte (an int 0..255, a
  one-byte `bytes`, or a character that encodes to one UTF-8 byte).
- `encode_message(message)` yields the signals for a whole `str` or `bytes`.
- `BitDecoder.feed(signo)` takes one signal and returns the finished byte
  after every eighth bit, otherwise `None`; other signals are ignored.
- `SIGNAL_ONE` and `SIGNAL_ZERO` are the signal numbers used for 1 and 0.

`sigtalk.client.send_message(pid, message, delay=0.001)` sends a message to a
running server and returns the number of signals sent. It raises `ValueError`
for a non-positive pid or a negative delay, and `OSError` if the process
cannot be signalled.

`sigtalk.server.Server(output=None)` does the receiving, writing to `output`
(standard output's binary buffer by default). `receive(signo, sender)`
handles one signal, writes any finished byte, acknowledges the sender and
returns the byte or `None`. `serve()` prints the pid, blocks the user signals
and handles them one by one with `sigwaitinfo` until interrupted.

## Helpers

`sigtalk.chars` has ASCII character tests and conversions that take an int
or a one-character string: `isalpha`, `isdigit`, `isalnum`, `isascii`,
`isprint`, `toupper`, `tolower`, and `strmapi(s, func)`, which builds a new
string from `func(index, char)`.

`sigtalk.text` has string and byte helpers: `atoi`, `itoa` (32-bit range),
`split` (on one character, dropping empty pieces), `strtrim`, `substr`,
`strjoin`, `strncmp`, `memcmp`, and the searches `strnstr`, `strchr`,
`strrchr` and `memchr`, which return an index into their input or `None`.

## Tests

```
pip install .[test]
pytest
```