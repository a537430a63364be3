# -*- coding: utf-8 -*-
"""The context holds the process-wide note handlers. Each samplers
invocation is a single short-lived pass over stdin, so there is only
ever one context, and it is created on first use.
"""

import sys

SAMPLERS_CONTEXT = None


def get_context():
    if not SAMPLERS_CONTEXT:
        set_context(SamplersContext())

    return SAMPLERS_CONTEXT


def set_context(context):
    global SAMPLERS_CONTEXT

    SAMPLERS_CONTEXT = context

    return context


def note(name, message, *a, **kw):
    return get_context().note(name, message, *a, **kw)


class SamplersContext(object):
    def __init__(self, **kwargs):
        self.note_handlers = list(kwargs.pop('note_handlers', []))
        if kwargs:
            raise TypeError('unexpected keyword arguments: %r'
                            % list(kwargs.keys()))

    def note(self, name, message, *a, **kw):
        """The report streams belong to the user, so diagnostics go
        here instead. This is a hook for recording conditions worth
        mentioning but never worth failing on, such as a histogram
        falling back to a single bucket, or the reader hitting the
        end of its input.
        """
        if not self.note_handlers:
            return
        if a:
            try:
                message = message % a
            except Exception:
                pass
        for nh in self.note_handlers:
            nh(name, message)
        return

    def add_note_handler(self, handler):
        if not callable(handler):
            raise TypeError('expected callable note handler, not %r'
                            % handler)
        if handler not in self.note_handlers:
            self.note_handlers.append(handler)

    def remove_note_handler(self, handler):
        try:
            self.note_handlers.remove(handler)
        except ValueError:
            pass

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s note_handlers=%r>' % (cn, len(self.note_handlers))


class StderrNoteHandler(object):
    "Writes notes to stderr, one per line. Installed by --verbose."
    def __init__(self, stream=None, prefix='samplers'):
        self.stream = stream
        self.prefix = prefix

    def __call__(self, name, message):
        stream = self.stream or sys.stderr
        try:
            stream.write('%s: [%s] %s\n' % (self.prefix, name, message))
            stream.flush()
        except (IOError, ValueError):
            # stderr went away, nowhere left to complain
            pass

    def __repr__(self):
        return '<%s stream=%r>' % (self.__class__.__name__, self.stream)
