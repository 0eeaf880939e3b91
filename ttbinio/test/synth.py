#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Build synthetic *.ttbin byte streams, one record at a time.

Each function returns the tag byte followed by its payload, so a stream is
just the concatenation of calls.

"""
from struct import pack

from ttbinio._dialect import (
    CURRENT_HEADER_RESERVED_LENGTH, FORMAT_CURRENT, FORMAT_LEGACY,
    LEGACY_GPS_UNKNOWN_LENGTH, LEGACY_HEADER_RESERVED_LENGTH, TAG_GPS,
    TAG_HEADER, TAG_HEART_RATE, TAG_LAP, TAG_SUMMARY, TAG_SWIM,
    TAG_TREADMILL)


TIMESTAMP = 1400000000    # 2014-05-13 16:53:20 UTC
VERSION = (1, 8, 46, 0)


def tagged(tag, payload):
    return bytes([tag]) + payload


def header(file_format=FORMAT_CURRENT, version=VERSION, timestamp=TIMESTAMP):
    reserved = (LEGACY_HEADER_RESERVED_LENGTH if file_format == FORMAT_LEGACY
                else CURRENT_HEADER_RESERVED_LENGTH)
    payload = pack('<B4BHI', file_format, *version, 0, timestamp)
    return tagged(TAG_HEADER, payload + bytes(reserved))


def gps(latitude=515000000, longitude=-1250000, heading=9000, speed=350,
        time=TIMESTAMP, calories=12, inc_distance=3.5, cum_distance=1024.25,
        cycles=7):
    payload = pack('<iiHHIHffB', latitude, longitude, heading, speed, time,
                   calories, inc_distance, cum_distance, cycles)
    return tagged(TAG_GPS, payload)


def legacy_gps(latitude=515000000, longitude=-1250000, heading=9000,
               speed=350, time=TIMESTAMP, calories=12, distance=35,
               unknown=bytes(range(1, LEGACY_GPS_UNKNOWN_LENGTH + 1))):
    payload = pack('<iiHHIHH', latitude, longitude, heading, speed, time,
                   calories, distance)
    return tagged(TAG_GPS, payload + unknown)


def heart_rate(rate=72, time=TIMESTAMP, legacy=False):
    if legacy:
        payload = pack('<BI', rate, time)
    else:
        payload = pack('<BBI', rate, 0, time)
    return tagged(TAG_HEART_RATE, payload)


def lap(index=1, activity=0, time=TIMESTAMP):
    return tagged(TAG_LAP, pack('<BBI', index, activity, time))


def summary(activity=0, distance=5000, duration=59, calories=300):
    return tagged(TAG_SUMMARY,
                  pack('<4I', activity, distance, duration, calories))


def treadmill(time=TIMESTAMP, distance=812.5, calories=40, steps=1100):
    return tagged(TAG_TREADMILL,
                  pack('<IfIIH', time, distance, calories, steps, 0))


def swim(time=TIMESTAMP, unknown=bytes(range(14)), calories=25):
    return tagged(TAG_SWIM, pack('<I14sI', time, unknown, calories))
