# sigtalk

Send short text messages from one process to another using nothing but
POSIX signals. Each byte is sent as eight bits, most significant bit
first: `SIGUSR1` carries a 1 and `SIGUSR2` carries a 0. A zero byte marks
the end of a message, and the receiving side writes a newline when it
sees one.

Only POSIX systems are supported, because the package relies on
`SIGUSR1`, `SIGUSR2` and `signal.pause()`.

## Installation

```
pip install .
```

## Receiving messages

Start the server in a terminal:

```
sigtalk-server
```

It prints `PID of my server : [<pid>]` and then waits for signals. Each
byte it receives is written to standard output as soon as its eighth bit
arrives. Stop it with Ctrl-C; its previous signal handlers are restored
on the way out.

## Sending a message

In a second terminal, give the client the id that the server printed and
the text to send:

```
sigtalk-client 12345 "hello there"
```

The message is sent as its bytes (UTF-8 text arrives as UTF-8), followed
by a zero byte, with a pause of 125 microseconds after each signal.

- With any number of arguments other than two, the client prints
  `we need 3 arguments` and sends nothing.
- If the process id contains anything but digits, it prints
  `PID SHOULD ONLY CONATAIN DIGITS`, sends nothing and exits with a
  non-zero status.
- If a signal cannot be delivered (for example, no such process), the
  error is reported on standard error and the exit status is 1.

## Using the library

The encoding and decoding work without sending any signals:

```python
from sigtalk.protocol import BitDecoder, encode_char, encode_message

encode_char("A")          # (0, 1, 0, 0, 0, 0, 0, 1)

decoder = BitDecoder()
received = [b for bit in encode_message("hi") if (b := decoder.feed(bit)) is not None]
# received == [104, 105, 0]
```

`BitDecoder.feed(bit)` returns the completed byte after every eighth bit
and `None` otherwise; `pending` tells how many bits of the current byte
have arrived.

`sigtalk.client.send_message(pid, message, delay=125e-6)` sends a message
to a running server, sleeping `delay` seconds after each signal, and
`sigtalk.client.is_pid(text)` checks that a string holds only digits.
`sigtalk.server.Server(output=None)` is the receiving side: its
`handle_signal(signum, frame)` takes one bit, and `serve_forever()`
installs the handlers and waits for signals. Output goes to standard
output unless another binary stream is given.

## Helper modules

The package also has small helpers:

- `sigtalk.ctype`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper` for ASCII characters or code points,
  `atoi` (leading whitespace, one optional sign, digits up to the first
  non-digit, wrapped to 32 bits) and `itoa` for 32-bit integers.
- `sigtalk.memory`: `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `bzero` and `calloc` on `bytes` and `bytearray`.
- `sigtalk.strings`: `split`, `strchr`, `strrchr`, `strjoin`, `strlcpy`,
  `strlcat`, `strncmp`, `strnstr`, `strmapi`, `striteri`, `strtrim` and
  `substr`. Searches return an index or `None`.
- `sigtalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd`, which write to any text stream.
- `sigtalk.printf`: `format_message(fmt, *args)` returns the formatted
  text and `printf(fmt, *args)` writes it to standard output and returns
  its length. The conversions are `%c %s %d %i %u %x %X %p %%`; an
  unknown conversion is dropped without using an argument, and running
  out of arguments raises `TypeError`.

## What it does not do

Delivery is not confirmed: the client never hears back from the server,
and bits can be lost if signals arrive faster than the server handles
them. The server makes no distinction between senders, so two clients
writing at once will interleave their bits.

## Running the tests

```
pip install ".[test]"
pytest
```