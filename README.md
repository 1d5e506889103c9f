# plogpy

A small logging library built from a few simple pieces:

- **Severities** (`plogpy.severity.Severity`): `NONE`, `FATAL`, `ERROR`, `WARNING`,
  `INFO`, `DEBUG`, `VERBOSE`. A lower value is more severe. A logger lets a record
  through when its severity is less than or equal to the logger's maximum.
- **Loggers** (`plogpy.logger`): there is one logger per integer instance id. Each
  logger has a maximum severity and a list of appenders. A logger is itself an
  appender, so one logger can feed another.
- **Appenders**: console (`ConsoleAppender`, `ColorConsoleAppender`), rolling file
  (`RollingFileAppender`), dynamic (`DynamicAppender`, which lets you add and remove
  appenders at run time), or your own subclass of `plogpy.appender.Appender`.
- **Formatters** (`plogpy.formatters`): `TxtFormatter`, `CsvFormatter`,
  `FuncMessageFormatter` and `MessageOnlyFormatter`, plus `TxtFormatterUtcTime` and
  `CsvFormatterUtcTime`.
- **Converters** (`plogpy.converters`): `UTF8Converter` and `NativeEOLConverter`. They
  turn formatted text into the bytes written to a file.
- **Helpers** (`plogpy.dumps`): `hexdump`, `ascdump` and `print_var`, for putting
  binary data and named values into messages.

The package has no dependencies outside the standard library.

## Installation

```
pip install plogpy
```

## Quick start

```python
from plogpy.severity import Severity
from plogpy.initializers import init_file
from plogpy import log

init_file(Severity.DEBUG, "Hello.txt")

log.debug("Hello log!")
log.info("The answer is ", 42)
```

Each logging function (`verbose`, `debug`, `info`, `warning`, `error`, `fatal`,
`none`, plus the general `log(severity, ...)`) joins its arguments into one message.
It returns the `Record` it sent, or `None` when the logger is missing or the severity
is filtered out. The record stores the calling function's name, line and file.

Values are turned into text like this:

- `None` becomes `(null)`.
- Strings and paths are written as they are. Bytes are decoded as UTF-8.
- Mappings are written as `[key:value, ...]`.
- Other sequences and sets are written as `[a, b, c]`.
- Anything else goes through `str`.

The function `plogpy.record.format_value` applies these rules.

## Loggers and instances

`init(max_severity, appender=None, instance_id=0)` returns the logger for an instance
id and creates it on the first call. The severity only takes effect when the logger is
created. If you pass an appender, it is added on every call. Other functions:

- `get(instance_id)` returns the logger, or `None` if it was never initialised.
- `reset()` forgets all loggers.
- `Logger.max_severity` can be changed at any time.

```python
from plogpy.logger import init, get
from plogpy.severity import Severity
from plogpy.console import ConsoleAppender
from plogpy.rolling_file import RollingFileAppender
from plogpy.formatters import CsvFormatter, TxtFormatter
from plogpy import log

file_appender = RollingFileAppender("MultiAppender.csv", CsvFormatter, max_file_size=8000, max_files=3)
console_appender = ConsoleAppender(TxtFormatter)
init(Severity.DEBUG, file_appender).add_appender(console_appender)

# A second, independent logger that forwards into the first one.
init(Severity.WARNING, get(), instance_id=1)
log.warning("routed through instance 1", instance_id=1)
```

## Conditional logging

```python
count = 0
log.log_if(Severity.DEBUG, count == 0, "nothing to do")

if log.is_enabled(Severity.DEBUG):
    log.debug("details: ", [1, 2, 3])
```

## Rolling files

`RollingFileAppender(file_name, formatter=TxtFormatter, converter=NativeEOLConverter, max_file_size=0, max_files=0)`
behaves like this:

- The file is opened in append mode on the first write.
- When a file is new and empty, it starts with the converted formatter header. With
  the UTF-8 converters that header begins with a byte-order mark.
- The file rolls over when `max_files` is positive and the file has grown past
  `max_file_size` bytes. Any limit below 1000 bytes is raised to 1000.
- On roll-over, `Hello.txt` becomes `Hello.1.txt`, `Hello.1.txt` becomes
  `Hello.2.txt`, and so on. The oldest copy is deleted.
- `set_file_name` switches to another file, which is opened on the next write.
- `set_max_files`, `set_max_file_size` and `roll_log_files` are also available.

`init_file(max_severity, file_name, max_file_size=0, max_files=0, formatter=None, instance_id=0)`
in `plogpy.initializers` sets this up in one call. Without a formatter, a name ending
in `.csv` selects `CsvFormatter` and any other name selects `TxtFormatter`. The
function `is_csv` makes that check.

`NativeEOLConverter` writes `\r\n` line endings on Windows and `\n` elsewhere. Pass
`converter=UTF8Converter` to always use `\n`.

## Console output

```python
from plogpy.severity import Severity
from plogpy.console import OutputStream
from plogpy.initializers import init_console
from plogpy import log

init_console(Severity.VERBOSE, OutputStream.STDOUT)
log.warning("Shown in yellow on a terminal")
```

`ConsoleAppender(formatter, output_stream, stream=None)` writes each formatted record
to standard output or standard error and flushes the stream. Pass `stream` to use any
other text stream instead.

`ColorConsoleAppender` adds ANSI colours, but only when the stream is a terminal:

| Severity         | Colour               |
|------------------|----------------------|
| fatal            | white on red         |
| error            | red                  |
| warning          | yellow               |
| debug, verbose   | cyan                 |

## Formats

- `TxtFormatter`: `2024-01-02 03:04:05.006 INFO  [tid] [func@line] message`
- `CsvFormatter`: the header is `Date;Time;Severity;TID;This;Function;Message`. Each
  row looks like `2024/01/02;03:04:05.006;INFO;tid;0;func@line;"message"`.
  - In the message, quotes are doubled.
  - A message longer than 32000 characters is cut there and `...` is appended.
  - The `This` column shows the address of the record's `obj`, or `0` when there is
    none.
- `FuncMessageFormatter`: `func@line: message`
- `MessageOnlyFormatter`: `message`

Every formatted line ends with a newline. The `UtcTime` variants print times in UTC;
the others use local time.

## Dynamic appenders

```python
from plogpy.dynamic import DynamicAppender
from plogpy.console import ConsoleAppender

dynamic = DynamicAppender()
init(Severity.VERBOSE, dynamic, instance_id=2)

console = ConsoleAppender()
dynamic.add_appender(console)
log.info("seen", instance_id=2)
dynamic.remove_appender(console)
log.info("goes nowhere", instance_id=2)
```

The same appender object is added only once.

## Dumping data

```python
from plogpy.dumps import hexdump, ascdump, print_var

log.info("data: ", hexdump(b"Hello!"))                                     # 48 65 6c 6c 6f 21
log.info("data: ", hexdump(bytes(range(16))).group(4).separator(" ", "|"))
log.info("text: ", ascdump(b"Hello!\xff"))                                 # Hello!.
log.info(print_var(x=10, y=20))                                            # x: 10, y: 20
```

`hexdump` and `ascdump` accept any bytes-like object. Text is encoded as UTF-8 first.

For `hexdump`:

- Bytes are separated by a space.
- Every 8 bytes are separated by two spaces instead.
- `group(0)` turns grouping off.

## Building records by hand

```python
from plogpy.record import Record
from plogpy.severity import Severity

record = Record(Severity.INFO, "main", 10) << "value: " << 42
record.printf(" and %s %d", "more", 7)
get().write(record)          # filtered by the logger's severity
```

`severity_to_string` and `severity_from_string` in `plogpy.severity` convert
severities to and from their short names (`FATAL`, `ERROR`, `WARN`, `INFO`, `DEBUG`,
`VERB`). Parsing looks only at the first letter and ignores case.

## Writing your own appender

```python
from plogpy.appender import Appender
from plogpy.formatters import FuncMessageFormatter

class MemoryAppender(Appender):
    def __init__(self):
        self.messages = []

    def write(self, record):
        self.messages.append(FuncMessageFormatter.format(record))
```

## What this package does not do

- It has no appenders for the Windows event log, the system debugger output or the
  Android log.
- It has no command-line program.
- It does not integrate with the standard `logging` module.
- The logging functions in `plogpy.log` never fill in a record's `obj`. Build a
  `Record` yourself if you need that column.