from plogpy.formatters import (
    CsvFormatter,
    CsvFormatterUtcTime,
    FuncMessageFormatter,
    MessageOnlyFormatter,
    TxtFormatter,
    TxtFormatterUtcTime,
)
from plogpy.record import Record
from plogpy.severity import Severity
from plogpy.util import Timestamp


def make_record(message, severity=Severity.INFO, func="main", line=12, seconds=0, millis=5):
    record = Record(severity, func, line)
    record << message
    record.time = Timestamp(seconds, millis)
    return record


def test_txt_utc_line():
    record = make_record("hi")
    assert TxtFormatterUtcTime.format(record) == (
        f"1970-01-01 00:00:00.005 INFO  [{record.tid}] [main@12] hi\n"
    )


def test_txt_local_differs_only_in_timestamp():
    record = make_record("hi", severity=Severity.WARNING, seconds=1_000_000)
    local = TxtFormatter.format(record)
    utc = TxtFormatterUtcTime.format(record)
    assert local[23:] == utc[23:]
    assert local[23:].startswith(" WARN  [")


def test_txt_header_is_empty():
    assert TxtFormatter.header() == ""
    assert TxtFormatterUtcTime.header() == ""


def test_csv_header():
    assert CsvFormatter.header() == "Date;Time;Severity;TID;This;Function;Message\n"


def test_csv_fields():
    record = make_record("hi", severity=Severity.ERROR)
    line = CsvFormatterUtcTime.format(record)
    fields = line.rstrip("\n").split(";")
    assert fields[0] == "1970/01/01"
    assert fields[2] == "ERROR"
    assert fields[3] == str(record.tid)
    assert fields[5] == "main@12"
    assert fields[6] == '"hi"'


def test_csv_quotes_are_doubled():
    record = make_record('say "hi"')
    assert CsvFormatterUtcTime.format(record).endswith(';"say ""hi"""\n')


def test_csv_long_message_is_truncated():
    record = make_record("x" * 32001)
    assert CsvFormatter.format(record).endswith(";\"" + "x" * 32000 + '..."\n')


def test_csv_message_at_limit_kept_whole():
    record = make_record("y" * 32000)
    assert CsvFormatter.format(record).endswith(";\"" + "y" * 32000 + '"\n')


def test_func_message_formatter_reduces_signature():
    record = make_record("m", func="void Foo::bar(int)", line=7)
    assert FuncMessageFormatter.format(record) == "Foo::bar@7: m\n"
    assert FuncMessageFormatter.header() == ""


def test_message_only_formatter():
    record = make_record("only this")
    assert MessageOnlyFormatter.format(record) == "only this" + "\n"
    assert MessageOnlyFormatter.header() == ""