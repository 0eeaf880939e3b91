#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Sequential reading of the raw byte stream.

"""
from ttbinio._util.exceptions import TruncatedRecordError


class ByteCursor:
    """A forward-only reader over an open binary file.

    Attributes
    ----------
    offset : int
        Number of bytes consumed so far; i.e. the position of the next byte.
    reader : _io.BufferedReader
        Open file to be read. Anything with a ``read(size)`` method returning
        bytes will do.
    """
    __slots__ = ('reader', 'offset')

    def __init__(self, reader):
        self.reader = reader
        self.offset = 0

    def read_tag(self):
        """Read a single tag byte.

        Returns
        -------
        int or None
            The tag, or None when the stream is exhausted. Running out here,
            between records, is how a well-formed file ends.
        """
        data = self.reader.read(1)
        if not data:
            return None
        self.offset += 1
        return data[0]

    def read_exact(self, size):
        """Read exactly `size` bytes.

        Raises
        ------
        TruncatedRecordError
            If fewer than `size` bytes are left. Nothing is returned in that
            case; a partial payload is never handed on.
        """
        start = self.offset
        data = self.reader.read(size)
        self.offset += len(data)
        if len(data) != size:
            raise TruncatedRecordError(start, size, len(data))
        return data
