# -*- coding: utf-8 -*-

import io
import math
import errno
import random

import pytest

from samplers.stream import (StreamReader,
                             StreamWriter,
                             ParseError,
                             StreamClosed,
                             parse_value,
                             format_value)


def test_parse_value():
    assert parse_value('1') == 1.0
    assert parse_value('  -2.5\n') == -2.5
    assert parse_value('1e3') == 1000.0
    assert parse_value(b'0.125\r\n') == 0.125
    assert parse_value('inf') == float('inf')
    assert parse_value('-inf') == float('-inf')
    assert math.isnan(parse_value('nan'))

    for bad in ('', '   ', 'abc', '1,5', '1_000', '1 2', '0x10'):
        with pytest.raises(ParseError):
            parse_value(bad)


def test_parse_error_details():
    try:
        parse_value('abc', line_no=3)
    except ParseError as pe:
        assert pe.line_no == 3
        assert pe.text == 'abc'
        assert 'line 3' in str(pe)
        assert isinstance(pe, ValueError)
    else:
        assert False


def test_format_value():
    assert format_value(None) == 'undefined'
    assert format_value(5) == '5'
    assert format_value(3.0) == '3.0'
    assert format_value(0.1) == '0.1'
    assert format_value(float('nan')) == 'nan'
    assert format_value(float('-inf')) == '-inf'


def test_format_round_trip():
    rng = random.Random(8675309)
    vals = [rng.gauss(0, 1e6) for i in range(1000)]
    vals += [1e-300, 5e-324, 1.7976931348623157e308, -0.0, 1 / 3.0]
    for val in vals:
        assert parse_value(format_value(val)) == val


def test_reader_binary():
    reader = StreamReader(io.BytesIO(b'1\n2.5\n  3 \n'))
    assert reader.read_all() == [1.0, 2.5, 3.0]
    assert reader.line_no == 3


def test_reader_text():
    reader = StreamReader(io.StringIO(u'1\n-1\n'))
    assert list(reader) == [1.0, -1.0]


def test_reader_empty():
    assert StreamReader(io.BytesIO(b'')).read_all() == []


def test_reader_parse_error():
    reader = StreamReader(io.BytesIO(b'1\n2\nthree\n4\n'))
    with pytest.raises(ParseError) as exc_info:
        reader.read_all()
    assert exc_info.value.line_no == 3
    assert exc_info.value.text == 'three'

    with pytest.raises(ParseError):
        StreamReader(io.BytesIO(b'1\n\n2\n')).read_all()
    with pytest.raises(ParseError):
        StreamReader(io.BytesIO(b'\xff\xfe\n')).read_all()


def test_reader_bad_stream():
    with pytest.raises(TypeError):
        StreamReader(object())


def test_writer():
    bio = io.BytesIO()
    writer = StreamWriter(bio)
    writer.write_value(1.5)
    writer.write_value(None)
    writer.write_line(u'█ 3')
    writer.write_lines(['a', 'b'])
    assert bio.getvalue() == u'1.5\nundefined\n█ 3\na\nb\n'.encode('utf-8')


def test_writer_requires_binary():
    with pytest.raises(ValueError):
        StreamWriter(io.StringIO())
    with pytest.raises(TypeError):
        StreamWriter(object())
    with pytest.raises(TypeError):
        StreamWriter(io.BytesIO(), flavor='strawberry')


class ClosedPipe(io.RawIOBase):
    def __init__(self, exc):
        self.exc = exc

    def writable(self):
        return True

    def write(self, data):
        raise self.exc


def test_writer_broken_pipe():
    writer = StreamWriter(ClosedPipe(BrokenPipeError(errno.EPIPE, 'gone')))
    with pytest.raises(StreamClosed):
        writer.write_value(1.0)

    writer = StreamWriter(ClosedPipe(OSError(errno.EPIPE, 'gone')))
    with pytest.raises(StreamClosed):
        writer.write_value(1.0)

    writer = StreamWriter(ClosedPipe(OSError(errno.ENOSPC, 'full')))
    with pytest.raises(OSError):
        writer.write_value(1.0)
