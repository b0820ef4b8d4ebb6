# sigtalk

sigtalk sends text from one process to another using nothing but the two
user signals, `SIGUSR1` and `SIGUSR2`. Each byte goes out as eight signals,
least significant bit first: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries
a 1 bit. A zero byte ends the message, and the receiving side writes a
newline for it. Anything after an embedded zero byte is not sent.

It needs a POSIX system; the user signals do not exist on Windows.

## Install

```
pip install .
```

## Commands

### sigtalk-server

```
sigtalk-server [--bonus]
```

The server prints its process id (`Server PID: <pid>`, or
`Bonus Server PID: <pid>` with `--bonus`) and then receives signals until
it is interrupted, writing each completed byte to standard output.

With `--bonus` it answers every received bit with `SIGUSR1` to the process
that sent it. It learns the sender through `signal.sigwaitinfo`; where that
call is missing (for example on macOS) the sender is unknown and no
acknowledgement is sent.

### sigtalk-client

```
sigtalk-client [--bonus] <PID> <message>
```

The client checks its arguments before it sends anything:

- after the optional `--bonus`, it takes exactly two arguments, the PID and
  the message; otherwise it prints a usage line;
- the PID must contain only the digits 0–9
  (`Error: PID must contain only digits (0-9).`);
- the PID must be greater than zero and name a process the client may
  signal (`Error: Invalid PID.`).

If a check fails, the client exits with status 1.

Without `--bonus` the client pauses 0.5 ms after each signal. With
`--bonus` it waits for the server's `SIGUSR1` after every bit before sending
the next one, and prints `Message sent successfully!` at the end. Use
`--bonus` on both sides together: a client in acknowledged mode waits
forever for replies a plain server never sends.

## Library

- `sigtalk.protocol`: `encode_byte`, `encode_message`, `decode_bits`,
  `render_byte`, and `ByteAssembler`, which collects bits with `push(bit)`
  and returns each completed byte.
- `sigtalk.server`: `Receiver(stream=None, acknowledge=None)`, whose
  `handle(sig, sender=None)` takes one signal and returns the byte it
  completed, if any; `serve(acknowledge=False, stream=None)`; `main`.
- `sigtalk.client`: `is_valid_pid`, `parse_pid` (raises `ClientError`),
  `signals_for`, `send_message(pid, message, acknowledged=False, delay=0.0005)`
  and `main`.
- `sigtalk.printf`: a small formatter for `%c %s %p %d %i %u %x %X %%`,
  with `sprintf`, `printf(fmt, *args, stream=None)` (returns the number of
  characters written) and the single-value helpers `format_int`,
  `format_unsigned`, `format_hex`, `format_pointer`, `format_string`.
  Integers wrap the way 32-bit C ints do (64-bit for `%p`); an unknown
  conversion prints nothing.
- `sigtalk.numbers`: `atoi`, `atof`, `itoa`, `nbrlen`.
- `sigtalk.strings`: C-style string and buffer helpers (`split`, `strtrim`,
  `substr`, `strnstr`, `strncmp`, `memcmp`, `memchr`, `strchr`, `strrchr`,
  `strjoin`, `strmapi`, `strlcpy`, `strlcat`). Searches return an index or
  `None`; `strlcpy` and `strlcat` return a `BoundedCopy(text, wanted)`.
- `sigtalk.ctype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, for ASCII codes or one-character
  strings.

```python
from sigtalk.protocol import encode_message, decode_bits

bits = encode_message(b"hi")
assert decode_bits(bits) == b"hi\x00"
```

## What it does not do

- The server keeps one bit buffer for everyone. Messages sent by two
  clients at the same time get their bits mixed together.
- There is no error detection, retransmission or encryption. A lost signal
  shifts every following bit.
- The plain mode depends on the fixed delay being long enough; under load,
  signals can be merged and bits lost.

## Tests

```
pip install ".[test]"
pytest
```