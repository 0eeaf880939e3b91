#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions for this package.

"""


class TTBinIOError(Exception):
    """Base exception."""
    _default_message = ''

    def __init__(self, message=None):
        super().__init__(message if message else self._default_message)


class UsageError(TTBinIOError):
    _default_message = 'need the filename'


class OpenError(TTBinIOError):
    def __init__(self, file_path, reason=None):
        message = 'failed to open: %s' % file_path
        if reason:
            message += ' (%s)' % reason
        super().__init__(message)
        self.file_path = file_path


class InvalidFileError(TTBinIOError):
    def __init__(self, fmt):
        determiner = 'an' if fmt[0] in 'aeiou' else 'a'  # grammar
        message = "this doesn't look like %s %s file!" % (determiner, fmt)
        super().__init__(message)


class TruncatedRecordError(TTBinIOError):
    """A fixed-length payload ended early. There is no way to continue."""

    def __init__(self, offset, wanted, got, tag=None):
        self.offset, self.wanted, self.got = offset, wanted, got
        self.tag = tag
        super().__init__(str(self))

    def __str__(self):
        where = '' if self.tag is None else 'tag 0x%02X: ' % self.tag
        return '%swanted %d bytes at offset %d but only %d left' % (
            where, self.wanted, self.offset, self.got)
