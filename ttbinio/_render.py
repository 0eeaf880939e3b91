#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Turn decoded records into lines of text.

Times are shown in UTC for most records but in local time for GPS samples
and tag 0x35. That's how the watch's own tools show them, so keep it.

"""
from datetime import datetime

import pytz

from ttbinio._protocol import (
    ActivitySummary, GPSFix, Header, HeartRateSample, LapMarker, R23Record,
    RecordLengths, SwimSample, TimestampedRecord, TreadmillSample,
    UnclassifiedRecord, UnknownTag)
from ttbinio._util.misc import hexdump


TZ_UTC = pytz.utc

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'

ACTIVITY_TYPES = {
    0: 'Run',
    1: 'Cycle',
    2: 'Swim',
    7: 'Treadmill',
}

RENDERERS = {}    # grows on import via @renders


def renders(cls):
    """Decorator for registering the renderer of a record type."""
    def register(func):
        RENDERERS[cls] = func
        return func
    return register


def activity_name(code):
    return ACTIVITY_TYPES.get(code, 'Type %d' % code)


def utc_time(seconds):
    return datetime.fromtimestamp(seconds, TZ_UTC).strftime(TIME_FORMAT)


def local_time(seconds, tz=None):
    """Format epoch seconds in `tz`, or the process's time zone if None."""
    return datetime.fromtimestamp(seconds, tz).strftime(TIME_FORMAT)


def render(record, tz=None):
    """Lines of text describing `record`.

    Parameters
    ----------
    record : ttbinio._protocol.Record
        Anything yielded by `ttbinio.iter_messages`.
    tz : pytz.tzinfo.BaseTzInfo, optional
        Zone for the records that show local time. Defaults to the zone of
        the running process.

    Returns
    -------
    list of str
        A new list on every call, without trailing newlines.
    """
    return RENDERERS[type(record)](record, tz)


@renders(Header)
def render_header(header, tz):
    return ['[%s] Header: file format %d, watch version (%d,%d,%d,%d)' % (
        (utc_time(header.timestamp), header.file_format) + header.version)]


@renders(RecordLengths)
def render_record_lengths(record, tz):
    return ['Record lengths (ignored)']


@renders(LapMarker)
def render_lap(lap, tz):
    return ['[%s] Lap: %d activity: %s' % (
        utc_time(lap.time), lap.lap, activity_name(lap.activity))]


@renders(GPSFix)
def render_gps(gps, tz):
    if not gps.has_fix:
        return ['', 'No GPS lock', '']

    parts = ['Lat: %f' % gps.latitude,
             'Long: %f' % gps.longitude,
             'Speed: %.2f m/s' % gps.speed,
             'Cal: %d' % gps.calories]
    if gps.cum_distance is None:
        parts.append('Distance: (+ %f m)' % gps.inc_distance)
    else:
        parts.append('Distance: %f m (+ %f m)' % (
            gps.cum_distance, gps.inc_distance))
    if gps.cycles is not None:
        parts.append('Cycles: %d' % gps.cycles)
    parts.append('Heading %.2f°' % gps.heading)

    line = '[%s] GPS: %s' % (local_time(gps.time, tz), ', '.join(parts))
    return ['', line, '']


@renders(HeartRateSample)
def render_heart_rate(sample, tz):
    return ['[%s] Heart BPM: %d' % (utc_time(sample.time), sample.heart_rate)]


@renders(ActivitySummary)
def render_summary(summary, tz):
    return ['Summary:',
            '  Activity type: %s' % activity_name(summary.activity),
            '  Distance %dm' % summary.distance,
            '  Duration: %d s' % summary.duration,
            '  Calories: %d' % summary.calories]


@renders(TreadmillSample)
def render_treadmill(sample, tz):
    return ['[%s] Treadmill: Distance: %.2f m  Calories: %d  Steps: %d' % (
        utc_time(sample.time), sample.distance, sample.calories,
        sample.steps)]


@renders(SwimSample)
def render_swim(sample, tz):
    return (['Swim: %s Calories: %d' % (utc_time(sample.time),
                                        sample.calories)]
            + hexdump(sample.unknown))


@renders(R23Record)
def render_r23(record, tz):
    summary = 'Tag 0x%02X: %04X  %04X  %02X' % (
        record.tag, record.u1, record.u2, record.u3)
    return [summary] + hexdump(record.payload)


@renders(UnclassifiedRecord)
def render_unclassified(record, tz):
    # First line of the dump goes on the same line as the tag.
    lines = hexdump(record.payload) or ['']
    lines[0] = 'Tag 0x%02X: %s' % (record.tag, lines[0])
    return lines


@renders(TimestampedRecord)
def render_timestamped(record, tz):
    return ['Tag 0x%02X: %02X %02X  %s' % (
        (record.tag,) + tuple(record.unknown[:2])
        + (local_time(record.time, tz),))]


@renders(UnknownTag)
def render_unknown(record, tz):
    return ['Unknown tag: %02X at %d' % (record.tag, record.offset)]
