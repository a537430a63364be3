# -*- coding: utf-8 -*-
"""Every samplers subcommand speaks the same protocol: one decimal
number per line, UTF-8, until end of input. The StreamReader turns
such a stream into floats, the StreamWriter turns values back into
lines that the reader will parse to the same float.
"""

import io
import os
import sys
import errno

from samplers.context import note
from samplers.common import DEFAULT_ENCODING, UNDEFINED


class ParseError(ValueError):
    "Raised for an input line that is not a number."
    def __init__(self, text, line_no=None):
        self.text = text
        self.line_no = line_no
        if line_no is None:
            msg = 'could not parse %r as a number' % (text,)
        else:
            msg = 'line %s: could not parse %r as a number' % (line_no, text)
        super(ParseError, self).__init__(msg)


class StreamClosed(EOFError):
    "Raised when the reading end of the output has gone away."
    pass


def parse_value(text, line_no=None):
    """Parses one line of input into a float. Surrounding whitespace is
    ignored. ``nan`` and ``inf`` are numbers, digit-grouping underscores
    and blank lines are not.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode(DEFAULT_ENCODING)
        except UnicodeDecodeError:
            raise ParseError(text, line_no)
    stripped = text.strip()
    if not stripped or '_' in stripped:
        raise ParseError(stripped, line_no)
    try:
        return float(stripped)
    except ValueError:
        raise ParseError(stripped, line_no)


def format_value(val):
    """Renders a value for output: None as ``undefined``, integers as
    integers, and floats in their shortest round-tripping form.
    """
    if val is None:
        return UNDEFINED
    if isinstance(val, float):
        return repr(val)
    return str(val)


def get_sys_stream(name):
    stream = getattr(sys, name)
    return getattr(stream, 'buffer', stream)


class StreamReader(object):
    """Iterates over the floats in *stream*, one line at a time. Works
    with binary and text streams, and the shortcut ``'stdin'``.

    Reading is lazy, so a ParseError surfaces when the bad line is
    reached. Use read_all() to read everything before acting on any of
    it.
    """
    def __init__(self, stream, encoding=None):
        if stream == 'stdin':
            stream = get_sys_stream(stream)
        if not callable(getattr(stream, 'readline', None)):
            raise TypeError('%s expected a readable stream, or shortcut'
                            ' value "stdin", not: %r'
                            % (self.__class__.__name__, stream))
        self.stream = stream
        self.encoding = encoding or DEFAULT_ENCODING
        self.line_no = 0

    def __iter__(self):
        for line in self.stream:
            self.line_no += 1
            if isinstance(line, bytes):
                try:
                    line = line.decode(self.encoding)
                except UnicodeDecodeError:
                    raise ParseError(line, self.line_no)
            yield parse_value(line, self.line_no)
        note('stream_read', 'end of input after %r lines', self.line_no)

    def read_all(self):
        return list(self)

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s stream=%r line_no=%r>' % (cn, self.stream, self.line_no)


class StreamWriter(object):
    """Writes lines of text to a binary stream, be it a BytesIO or
    console (stdout/stderr). Each line is flushed as it's written, so
    downstream stages of a pipeline see values as they're produced.

    A closed pipe on the other end raises StreamClosed, which callers
    should treat as a normal, early end of output.
    """
    def __init__(self, stream, encoding=None, **kwargs):
        self.encoding = encoding or DEFAULT_ENCODING
        self.errors = kwargs.pop('errors', 'backslashreplace')
        self.sep = kwargs.pop('sep', '\n')
        if kwargs:
            raise TypeError('unexpected keyword arguments: %r'
                            % list(kwargs.keys()))
        if stream in ('stdout', 'stderr'):
            stream = get_sys_stream(stream)
        if not callable(getattr(stream, 'write', None)):
            raise TypeError('%s expected a writable binary stream, or'
                            ' shortcut values "stderr" or "stdout", not: %r'
                            % (self.__class__.__name__, stream))
        _mode = getattr(stream, 'mode', None)
        if (_mode and 'b' not in _mode) or isinstance(stream, io.TextIOBase):
            raise ValueError('expected stream opened in binary mode, not: %r'
                             % (stream,))
        self.stream = stream
        if isinstance(self.sep, str):
            self.sep = self.sep.encode(self.encoding)

    def write_line(self, line):
        entry = line.encode(self.encoding, self.errors)
        try:
            self.stream.write(entry + self.sep if self.sep else entry)
            self.stream.flush()
        except (IOError, OSError) as e:
            if isinstance(e, BrokenPipeError) or e.errno == errno.EPIPE:
                note('stream_write', 'output closed: %r', e)
                raise StreamClosed('output stream closed: %r' % (e,))
            raise
        return

    def write_lines(self, lines):
        for line in lines:
            self.write_line(line)

    def write_value(self, val):
        self.write_line(format_value(val))

    def __repr__(self):
        return '<%s stream=%r>' % (self.__class__.__name__, self.stream)


def silence_stdout():
    """After a broken pipe, the interpreter's own flush of stdout at
    exit would fail again and complain. Point stdout at devnull so it
    doesn't.
    """
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError, io.UnsupportedOperation) as e:
        note('stream_write', 'could not redirect stdout: %r', e)
    return
