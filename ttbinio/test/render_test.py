#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import pytz

from ttbinio._dialect import CURRENT
from ttbinio._protocol import (
    NO_FIX_TIME, ActivitySummary, GPSFix, HeartRateSample, LapMarker,
    TimestampedRecord, UnclassifiedRecord, UnknownTag, decode)
from ttbinio._render import activity_name, render
from ttbinio._util.misc import hexdump
from ttbinio.test import synth


TOKYO = pytz.timezone('Asia/Tokyo')


def test_activity_names():
    assert [activity_name(code) for code in (0, 1, 2, 7)] == [
        'Run', 'Cycle', 'Swim', 'Treadmill']
    assert activity_name(4) == 'Type 4'


def test_hexdump_width():
    lines = hexdump(bytes(range(40)))
    assert len(lines) == 2
    assert lines[0].startswith(' 00 01 02')
    assert lines[0].endswith(' 1E 1F')
    assert lines[1] == ' 20 21 22 23 24 25 26 27'
    assert hexdump(bytes(32)) == [' 00' * 32]
    assert hexdump(b'') == []


def test_header():
    header = decode(0x20, synth.header()[1:], CURRENT)
    assert render(header) == [
        '[2014-05-13 16:53:20] Header: file format 7, '
        'watch version (1,8,46,0)']


def test_gps_uses_local_time():
    gps = GPSFix(latitude=-85.0, longitude=12.5, heading=90.0, speed=3.5,
                 time=synth.TIMESTAMP, calories=12, inc_distance=3.5,
                 cum_distance=1024.25, cycles=7)
    blank, line, blank_again = render(gps, TOKYO)

    assert blank == blank_again == ''
    assert line.startswith('[2014-05-14 01:53:20] GPS: Lat: -85.000000, '
                           'Long: 12.500000, Speed: 3.50 m/s, Cal: 12')
    assert 'Distance: 1024.250000 m (+ 3.500000 m)' in line
    assert 'Cycles: 7' in line
    assert line.endswith('Heading 90.00°')


def test_legacy_gps_line():
    gps = GPSFix(latitude=1.0, longitude=2.0, heading=0.0, speed=0.0,
                 time=synth.TIMESTAMP, calories=0, inc_distance=3.5)
    line = render(gps, TOKYO)[1]
    assert 'Distance: (+ 3.500000 m)' in line
    assert 'Cycles' not in line


def test_gps_without_fix():
    assert render(GPSFix(time=NO_FIX_TIME)) == ['', 'No GPS lock', '']


def test_other_records_use_utc():
    heart = HeartRateSample(heart_rate=72, time=synth.TIMESTAMP)
    lap = LapMarker(lap=2, activity=7, time=synth.TIMESTAMP)

    assert render(heart, TOKYO) == ['[2014-05-13 16:53:20] Heart BPM: 72']
    assert render(lap, TOKYO) == [
        '[2014-05-13 16:53:20] Lap: 2 activity: Treadmill']


def test_summary():
    summary = ActivitySummary(activity=9, distance=5000, duration=60,
                              calories=300)
    assert render(summary) == ['Summary:',
                               '  Activity type: Type 9',
                               '  Distance 5000m',
                               '  Duration: 60 s',
                               '  Calories: 300']


def test_unclassified():
    record = UnclassifiedRecord(tag=0x30, payload=b'\x0a\xff')
    assert render(record) == ['Tag 0x30:  0A FF']
    assert render(UnclassifiedRecord(tag=0x37, payload=b'')) == ['Tag 0x37: ']


def test_timestamped_unclassified():
    record = TimestampedRecord(tag=0x35, unknown=b'\x01\xfe',
                               time=synth.TIMESTAMP)
    assert render(record, TOKYO) == ['Tag 0x35: 01 FE  2014-05-14 01:53:20']


def test_unknown_tag():
    assert render(UnknownTag(tag=0x99, offset=113)) == [
        'Unknown tag: 99 at 113']


def test_results_are_not_shared():
    heart = HeartRateSample(heart_rate=72, time=synth.TIMESTAMP)
    first = render(heart)
    first.append('scribble')
    assert render(heart) == ['[2014-05-13 16:53:20] Heart BPM: 72']
