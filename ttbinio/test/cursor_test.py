#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import io

import pytest

from ttbinio._cursor import ByteCursor
from ttbinio._util.exceptions import TruncatedRecordError


def test_read_tag():
    cursor = ByteCursor(io.BytesIO(b'\x20\x99'))
    assert cursor.read_tag() == 0x20
    assert cursor.read_tag() == 0x99
    assert cursor.offset == 2


def test_end_of_stream_between_records():
    cursor = ByteCursor(io.BytesIO(b''))
    assert cursor.read_tag() is None
    assert cursor.offset == 0


def test_read_exact():
    cursor = ByteCursor(io.BytesIO(bytes(range(10))))
    cursor.read_tag()
    assert cursor.read_exact(4) == b'\x01\x02\x03\x04'
    assert cursor.offset == 5


def test_short_read_is_an_error():
    cursor = ByteCursor(io.BytesIO(b'\x25\x48\x00'))
    cursor.read_tag()

    with pytest.raises(TruncatedRecordError) as info:
        cursor.read_exact(6)

    error = info.value
    assert (error.offset, error.wanted, error.got) == (1, 6, 2)
    assert 'wanted 6 bytes at offset 1' in str(error)
