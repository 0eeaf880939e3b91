#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Decode individual records.

Every decoder takes the raw payload that followed a tag (already read to the
length the active dialect gives for that tag) and returns a record object
with physical units applied. Decoders are registered in `DECODERS` by tag.

Record types whose structure isn't understood keep their bytes untouched so
that they can be hex-dumped.

"""
from ttbinio._dialect import (
    TAG_GPS, TAG_HEADER, TAG_HEART_RATE, TAG_LAP, TAG_R23, TAG_R26, TAG_R30,
    TAG_R35, TAG_R37, TAG_RECORD_LENGTHS, TAG_SUMMARY, TAG_SWIM,
    TAG_TREADMILL)


NO_FIX_TIME = 0xFFFFFFFF

DECODERS = {}    # grows on import via @decoder


def decoder(tag):
    """Decorator for registering the decoder of a tag."""
    def register(func):
        DECODERS[tag] = func
        return func
    return register


class Record:
    """Base for decoded records.

    Subclasses list their fields in ``__slots__``; values are assigned by
    name from a dict produced by `Layout.unpack`.
    """
    __slots__ = ()

    def __init__(self, **values):
        for name in self._fields():
            setattr(self, name, values.get(name))

    @classmethod
    def _fields(cls):
        """Slot names of this class and its bases, base first."""
        return tuple(name for klass in reversed(cls.__mro__)
                     for name in getattr(klass, '__slots__', ()))

    def __iter__(self):
        for name in self._fields():
            yield name, getattr(self, name)

    def __eq__(self, other):
        return type(self) is type(other) and dict(self) == dict(other)

    def __repr__(self):
        fields = ', '.join('%s=%r' % item for item in self)
        return '%s(%s)' % (type(self).__name__, fields)


class Header(Record):
    __slots__ = ('file_format', 'version', 'timestamp', 'unknown', 'reserved')

    def __init__(self, **values):
        super().__init__(**values)
        self.version = tuple(self.version)   # watch firmware, 4 numbers


class RecordLengths(Record):
    """Seems to list ``(tag, length + 1)`` for each record type. Unused."""
    __slots__ = ('payload',)


class LapMarker(Record):
    __slots__ = ('lap', 'activity', 'time')


class GPSFix(Record):
    """One GPS sample.

    Without a satellite fix only `time` is set (to `NO_FIX_TIME`); nothing
    else in the payload means anything. The legacy dialect has no
    `cum_distance` or `cycles`, but does have some unknown bytes instead.
    """
    __slots__ = ('latitude', 'longitude', 'heading', 'speed', 'time',
                 'calories', 'inc_distance', 'cum_distance', 'cycles',
                 'unknown')

    @property
    def has_fix(self):
        return self.time != NO_FIX_TIME


class HeartRateSample(Record):
    __slots__ = ('heart_rate', 'time', 'unknown')


class ActivitySummary(Record):
    __slots__ = ('activity', 'distance', 'duration', 'calories')


class TreadmillSample(Record):
    __slots__ = ('time', 'distance', 'calories', 'steps', 'unknown')


class SwimSample(Record):
    __slots__ = ('time', 'calories', 'unknown')


class UnclassifiedRecord(Record):
    __slots__ = ('tag', 'payload')


class R23Record(UnclassifiedRecord):
    """Tag 0x23. The first three fields are pulled out for display only."""
    __slots__ = ('u1', 'u2', 'u3')


class TimestampedRecord(Record):
    """Tag 0x35: two unknown bytes and a time."""
    __slots__ = ('tag', 'unknown', 'time')


class UnknownTag(Record):
    """A tag without a decoder. `offset` is where the tag byte itself was."""
    __slots__ = ('tag', 'offset')


@decoder(TAG_HEADER)
def decode_header(payload, dialect):
    return Header(**dialect.layout(TAG_HEADER).unpack(payload))


@decoder(TAG_RECORD_LENGTHS)
def decode_record_lengths(payload, dialect):
    return RecordLengths(**dialect.layout(TAG_RECORD_LENGTHS).unpack(payload))


@decoder(TAG_LAP)
def decode_lap(payload, dialect):
    return LapMarker(**dialect.layout(TAG_LAP).unpack(payload))


@decoder(TAG_GPS)
def decode_gps(payload, dialect):
    layout = dialect.layout(TAG_GPS)

    # Check the time first: without a fix the rest is rubbish.
    time = layout.unpack_field(payload, 'time')
    if time == NO_FIX_TIME:
        return GPSFix(time=time)

    return GPSFix(**layout.unpack(payload))


@decoder(TAG_HEART_RATE)
def decode_heart_rate(payload, dialect):
    return HeartRateSample(**dialect.layout(TAG_HEART_RATE).unpack(payload))


@decoder(TAG_SUMMARY)
def decode_summary(payload, dialect):
    return ActivitySummary(**dialect.layout(TAG_SUMMARY).unpack(payload))


@decoder(TAG_TREADMILL)
def decode_treadmill(payload, dialect):
    return TreadmillSample(**dialect.layout(TAG_TREADMILL).unpack(payload))


@decoder(TAG_SWIM)
def decode_swim(payload, dialect):
    return SwimSample(**dialect.layout(TAG_SWIM).unpack(payload))


@decoder(TAG_R23)
def decode_r23(payload, dialect):
    values = dialect.layout(TAG_R23).unpack(payload)
    return R23Record(tag=TAG_R23, payload=payload, u1=values['u1'],
                     u2=values['u2'], u3=values['u3'])


@decoder(TAG_R35)
def decode_r35(payload, dialect):
    values = dialect.layout(TAG_R35).unpack(payload)
    return TimestampedRecord(tag=TAG_R35, **values)


def _unclassified(tag):
    def decode(payload, dialect):
        return UnclassifiedRecord(tag=tag, payload=payload)
    decode.__name__ = 'decode_r%02x' % tag
    return decode


for _tag in (TAG_R26, TAG_R30, TAG_R37):
    decoder(_tag)(_unclassified(_tag))


def decode(tag, payload, dialect):
    """Decode the payload that followed `tag`.

    Raises
    ------
    KeyError
        If there's no decoder for `tag`.
    """
    return DECODERS[tag](payload, dialect)
