#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
General utilities to be used internally.

"""

HEXDUMP_WIDTH = 32    # bytes per line


def hexdump(data, width=HEXDUMP_WIDTH):
    """Render bytes as lines of space-prefixed, upper-case hex pairs.

    Parameters
    ----------
    data : bytes
        The payload to dump.
    width : int, optional
        Bytes per line.

    Returns
    -------
    list of str
        One string per line; empty if `data` is empty.

    Examples
    --------
        >>> hexdump(b'\\x01\\xab')
        [' 01 AB']
    """
    return [''.join(' %02X' % byte for byte in data[start:start + width])
            for start in range(0, len(data), width)]


def apply_scale_offset(raw, scale=1, offset=0):
    """Physical value from a raw integer: ``raw / scale - offset``.

    Integers are left as integers when there is no scale to apply, so
    counters and corrected durations stay exact.
    """
    value = raw / scale if scale != 1 else raw
    return value - offset if offset else value
