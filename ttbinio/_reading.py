#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Walk a *.ttbin stream record by record.

There is no index and no length prefix: read a tag, read however many bytes
the active dialect says that tag's payload has, decode, repeat. The header
must come first because its format byte decides the dialect.

A tag we have no decoder for can't be skipped, since its length is unknown.
It is reported and the very next byte is read as a tag. That may well be
payload, so the output can be junk until the stream happens to line up again.

"""
from contextlib import contextmanager
import logging
import sys

import numpy as np
from pandas import DataFrame, DatetimeIndex, to_datetime
import pytz

from ttbinio._cursor import ByteCursor
from ttbinio._dialect import TAG_HEADER, select_dialect
from ttbinio._protocol import (
    DECODERS, GPSFix, HeartRateSample, LapMarker, TreadmillSample,
    UnknownTag, decode)
from ttbinio._render import render
from ttbinio._util.exceptions import (
    InvalidFileError, OpenError, TruncatedRecordError)


logger = logging.getLogger(__name__)

TZ_UTC = pytz.utc


@contextmanager
def open_ttbin(file_path):
    try:
        reader = open(file_path, 'rb')
    except OSError as e:
        raise OpenError(file_path, e.strerror) from e

    try:
        yield reader
    finally:
        reader.close()


def read_payload(cursor, tag, size):
    """Read a fixed-length payload, blaming `tag` if it comes up short."""
    try:
        return cursor.read_exact(size)
    except TruncatedRecordError as e:
        e.tag = tag
        raise


def read_header(cursor):
    """Read the leading header and pick the dialect from it.

    Returns
    -------
    (Header, Dialect)
    """
    tag = cursor.read_tag()
    if tag != TAG_HEADER:
        raise InvalidFileError('ttbin')

    # The header's own length depends on the format byte at its start.
    marker = read_payload(cursor, tag, 1)
    dialect = select_dialect(marker[0])
    rest = read_payload(cursor, tag, dialect.length(TAG_HEADER) - 1)

    return decode(TAG_HEADER, marker + rest, dialect), dialect


def iter_messages(reader):
    """Generator function for decoding records from an open binary stream.

    Parameters
    ----------
    reader : file-like
        Opened in binary mode. Read front to back, exactly once.

    Yields
    ------
    Record
        The header first, then one record per tag. Tags without a decoder
        come out as `UnknownTag`.

    Raises
    ------
    InvalidFileError
        If the stream doesn't start with a header.
    TruncatedRecordError
        If the stream ends part way through a payload. Records already
        yielded stand; the broken one is never yielded.
    """
    cursor = ByteCursor(reader)

    header, dialect = read_header(cursor)
    yield header

    while True:
        offset = cursor.offset
        tag = cursor.read_tag()
        if tag is None:   # clean end, between records
            return

        if tag not in DECODERS:
            logger.debug('unknown tag 0x%02X at offset %d', tag, offset)
            yield UnknownTag(tag=tag, offset=offset)
            continue

        payload = read_payload(cursor, tag, dialect.length(tag))
        yield decode(tag, payload, dialect)


def gen_messages(file_path):
    """Like `iter_messages`, but opens (and closes) `file_path` itself."""
    with open_ttbin(file_path) as reader:
        yield from iter_messages(reader)


def dump(file_path, out=None, *, tz_str=None):
    """Write a text description of every record in `file_path`.

    Parameters
    ----------
    file_path : str
        Path to the *.ttbin file.
    out : file-like, optional
        Where to write; stdout by default.
    tz_str : str, optional
        Zone name (for `pytz.timezone`) used for the records shown in local
        time. The process's own zone by default.
    """
    out = sys.stdout if out is None else out
    tz = pytz.timezone(tz_str) if tz_str is not None else None

    for message in gen_messages(file_path):
        for line in render(message, tz):
            print(line, file=out)


def _or_nan(value):
    return np.nan if value is None else value


def gen_records(file_path):
    """Generator function for iterating over individual samples.

    "Records" here are dictionary objects representing a single sample of
    data (a GPS fix, a heart rate reading or a treadmill sample); i.e. a row
    in a tabular representation. Note this can be passed to the
    `from_records` constructor method of `pandas.DataFrame`s.

    Timestamps are left as epoch seconds.
    """
    lap = 1
    for message in gen_messages(file_path):
        if isinstance(message, LapMarker):
            lap += 1
            continue

        if isinstance(message, GPSFix):
            if not message.has_fix:
                continue
            record = {
                'lat': message.latitude,
                'lon': message.longitude,
                'speed': message.speed,
                'heading': message.heading,
                'calories': message.calories,
                'dist': _or_nan(message.cum_distance),
                'cycles': _or_nan(message.cycles),
            }
        elif isinstance(message, HeartRateSample):
            record = {'hr': message.heart_rate}
        elif isinstance(message, TreadmillSample):
            record = {
                'dist': message.distance,
                'calories': message.calories,
                'steps': message.steps,
            }
        else:
            continue

        record.update(timestamp=message.time, lap=lap)
        yield record


def read_and_format(file_path, *, tz_str=None):
    """Read the samples of a *.ttbin file into a DataFrame.

    The index is the (timezone aware) sample time. Samples logged in the same
    second, e.g. a GPS fix and a heart rate reading, are merged into one row.
    """
    data = DataFrame.from_records(gen_records(file_path))

    if 'timestamp' not in data:
        return data

    timezone = pytz.timezone(tz_str) if tz_str is not None else TZ_UTC
    timestamps = to_datetime(data.pop('timestamp'), unit='s', utc=True)
    data.index = DatetimeIndex(timestamps.dt.tz_convert(timezone), name='time')

    return data.groupby(level='time').first()
