#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Record layouts for the two revisions of the format seen so far.

Each layout is a sequence of ``(name, struct code, scale, offset)`` fields,
all little-endian with no padding between them. Decoded values are
``raw / scale - offset`` (see `ttbinio._util.misc.apply_scale_offset`).

The header and GPS records (and the width of the heart rate record) are what
differ between the two; every other tag has the same layout in both.

"""
from collections import namedtuple
import logging
from struct import calcsize, unpack, unpack_from

from ttbinio._util.misc import apply_scale_offset


logger = logging.getLogger(__name__)


TAG_RECORD_LENGTHS = 0x16
TAG_HEADER = 0x20
TAG_LAP = 0x21
TAG_GPS = 0x22
TAG_R23 = 0x23
TAG_HEART_RATE = 0x25
TAG_R26 = 0x26
TAG_SUMMARY = 0x27
TAG_R30 = 0x30
TAG_TREADMILL = 0x32
TAG_SWIM = 0x34
TAG_R35 = 0x35
TAG_R37 = 0x37

# Payload lengths of records we don't understand, as observed in captured
# files. Nothing but those captures backs these up, so revise freely.
UNCLASSIFIED_LENGTHS = {
    TAG_RECORD_LENGTHS: 69,
    TAG_R23: 19,
    TAG_R26: 6,
    TAG_R30: 2,
    TAG_R35: 6,
    TAG_R37: 1,
}
LEGACY_GPS_UNKNOWN_LENGTH = 9   # u16, u16, u8, u16, u16
# Only the 105 byte reserved block has been seen in captures; the legacy
# length is inferred, not observed.
LEGACY_HEADER_RESERVED_LENGTH = 101
CURRENT_HEADER_RESERVED_LENGTH = 105

FORMAT_LEGACY = 5
FORMAT_CURRENT = 7


class Field(namedtuple('Field', ('name', 'code', 'scale', 'offset'))):
    __slots__ = ()

    def __new__(cls, name, code, scale=1, offset=0):
        return super().__new__(cls, name, code, scale, offset)

    @property
    def is_raw(self):
        return self.code.endswith('s')


class Layout:
    """Fixed byte layout of one record's payload.

    Attributes
    ----------
    fields : tuple of Field
    fmt : str
        Format for struct.unpacking the whole payload.
    size : int
        Payload length in bytes.
    """
    __slots__ = ('fields', 'fmt', 'size')

    def __init__(self, *fields):
        self.fields = tuple(Field(*field) for field in fields)
        self.fmt = '<' + ''.join(field.code for field in self.fields)
        self.size = calcsize(self.fmt)

    def __repr__(self):
        return '%s(%r, size=%d)' % (type(self).__name__, self.fmt, self.size)

    def unpack(self, payload):
        """Decode a whole payload into a dict of scaled values."""
        values = unpack(self.fmt, payload)
        return {field.name: self._convert(field, value)
                for field, value in zip(self.fields, values)}

    def unpack_field(self, payload, name):
        """Decode a single named field without touching the others."""
        start = 0
        for field in self.fields:
            code = '<' + field.code
            if field.name == name:
                value, = unpack_from(code, payload, start)
                return self._convert(field, value)
            start += calcsize(code)
        raise KeyError(name)

    @staticmethod
    def _convert(field, value):
        if field.is_raw:
            return value
        return apply_scale_offset(value, field.scale, field.offset)


def raw_layout(size, name='payload'):
    return Layout((name, '%ds' % size))


SHARED_LAYOUTS = {
    TAG_RECORD_LENGTHS: raw_layout(UNCLASSIFIED_LENGTHS[TAG_RECORD_LENGTHS]),
    TAG_LAP: Layout(('lap', 'B'), ('activity', 'B'), ('time', 'I')),
    TAG_R23: Layout(('u1', 'H'), ('u2', 'H'), ('u3', 'B'),
                    ('unknown', '%ds' % (UNCLASSIFIED_LENGTHS[TAG_R23] - 5))),
    TAG_R26: raw_layout(UNCLASSIFIED_LENGTHS[TAG_R26]),
    TAG_SUMMARY: Layout(('activity', 'I'),
                        ('distance', 'I'),                # metres
                        ('duration', 'I', 1, -1),         # stored as secs - 1
                        ('calories', 'I')),
    TAG_R30: raw_layout(UNCLASSIFIED_LENGTHS[TAG_R30]),
    TAG_TREADMILL: Layout(('time', 'I'),
                          ('distance', 'f'),              # metres
                          ('calories', 'I'),
                          ('steps', 'I'),
                          ('unknown', '2s')),
    TAG_SWIM: Layout(('time', 'I'), ('unknown', '14s'), ('calories', 'I')),
    TAG_R35: Layout(('unknown', '%ds' % (UNCLASSIFIED_LENGTHS[TAG_R35] - 4)),
                    ('time', 'I')),
    TAG_R37: raw_layout(UNCLASSIFIED_LENGTHS[TAG_R37]),
}

GPS_POSITION_FIELDS = (
    ('latitude', 'i', 1e7),     # 1e-7 degrees
    ('longitude', 'i', 1e7),
    ('heading', 'H', 100),      # centidegrees, 0 = North, 9000 = East
    ('speed', 'H', 100),        # cm/s
    ('time', 'I'),              # 0xFFFFFFFF when there's no fix
    ('calories', 'H'),
)


class Dialect:
    """One revision of the format: a layout for every known tag."""
    __slots__ = ('name', 'format_marker', 'layouts')

    def __init__(self, name, format_marker, layouts):
        self.name = name
        self.format_marker = format_marker
        self.layouts = dict(SHARED_LAYOUTS)
        self.layouts.update(layouts)

    def __repr__(self):
        return '<Dialect %s (format %d)>' % (self.name, self.format_marker)

    def __contains__(self, tag):
        return tag in self.layouts

    def layout(self, tag):
        return self.layouts[tag]

    def length(self, tag):
        """Payload length in bytes, not counting the tag itself."""
        return self.layouts[tag].size


LEGACY = Dialect('legacy', FORMAT_LEGACY, {
    TAG_HEADER: Layout(('file_format', 'B'), ('version', '4s'),
                       ('unknown', 'H'), ('timestamp', 'I'),
                       ('reserved', '%ds' % LEGACY_HEADER_RESERVED_LENGTH)),
    TAG_GPS: Layout(*GPS_POSITION_FIELDS,
                    ('inc_distance', 'H', 10),    # decimetres
                    ('unknown', '%ds' % LEGACY_GPS_UNKNOWN_LENGTH)),
    TAG_HEART_RATE: Layout(('heart_rate', 'B'), ('time', 'I')),
})

CURRENT = Dialect('current', FORMAT_CURRENT, {
    TAG_HEADER: Layout(('file_format', 'B'), ('version', '4s'),
                       ('unknown', 'H'), ('timestamp', 'I'),
                       ('reserved', '%ds' % CURRENT_HEADER_RESERVED_LENGTH)),
    TAG_GPS: Layout(*GPS_POSITION_FIELDS,
                    ('inc_distance', 'f'),        # metres
                    ('cum_distance', 'f'),
                    ('cycles', 'B')),             # steps, maybe
    TAG_HEART_RATE: Layout(('heart_rate', 'B'), ('unknown', '1s'),
                           ('time', 'I')),
})

DIALECTS_BY_MARKER = {dialect.format_marker: dialect
                      for dialect in (LEGACY, CURRENT)}


def select_dialect(format_marker):
    """Pick the dialect for a header's format byte.

    Unrecognised markers get the current dialect. That is an assumption,
    not knowledge, so it is logged.
    """
    try:
        dialect = DIALECTS_BY_MARKER[format_marker]
    except KeyError:
        logger.warning('unrecognised file format %d, assuming %s',
                       format_marker, CURRENT.name)
        return CURRENT

    logger.debug('file format %d: using the %s layouts',
                 format_marker, dialect.name)
    return dialect
