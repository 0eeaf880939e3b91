"""
Decode the tag-delimited binary activity logs (*.ttbin) written by TomTom
GPS sports watches.

The format is undocumented. What is known was reverse-engineered from file
captures, so several record layouts are only partially understood; those
records are kept as raw bytes and hex-dumped rather than guessed at.

The stream is a sequence of records, each a one-byte tag followed by a
fixed-length payload. There is no length prefix, so the decoder has to know
every payload length in advance. Two revisions of the format have been seen
("legacy" and "current"); the header's format byte says which one applies.

"""
__version__ = '0.1.0'

from ttbinio._reading import (
    dump, gen_messages, gen_records, iter_messages, open_ttbin)
from ttbinio._reading import read_and_format as read
from ttbinio._render import render
