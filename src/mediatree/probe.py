'''
# Summary
Reads the title and duration of media containers.

    - probe:      Dispatches on file extension. Returns None for unsupported or unreadable files.
    - probe_mkv:  Matroska, read with the ffprobe command line tool.
    - probe_mp4:  MPEG-4, read with mutagen.
'''

import os
import json
import shlex
import logging
import subprocess
from typing import Any, Callable

from mutagen import MutagenError
from mutagen.mp4 import MP4

from . import config
from . import constants
from .tree import Track

# helper functions
def seconds_to_ms(seconds: float) -> int:
    '''Converts a duration in seconds to whole milliseconds, clamped at zero.'''
    return max(int(seconds * 1000), 0)

def command_ffprobe_format(path: str) -> list[str]:
    # ffprobe -v error -show_entries format=duration:format_tags=title -of json '/media/movies/film.mkv'
    command = shlex.split(f"{config.FFPROBE} -v error -show_entries format=duration:format_tags=title -of json")
    command.append(path)
    return command

def read_ffprobe_format(path: str) -> dict[str, Any] | None:
    '''Returns the ffprobe 'format' section for the file at `path`, or None if it can't be read.'''
    command = command_ffprobe_format(path)
    try:
        logging.debug(f"run command: {shlex.join(command)}")
        result = subprocess.run(command, check=True, capture_output=True, encoding='utf-8', errors='replace')
    except FileNotFoundError:
        logging.error(f"ffprobe executable not found: '{config.FFPROBE}'")
        return None
    except subprocess.CalledProcessError as error:
        logging.debug(f"return code '{error.returncode}':\n{error.stderr}".strip())
        return None

    try:
        return json.loads(result.stdout)['format']
    except (json.JSONDecodeError, KeyError, TypeError) as error:
        logging.debug(f"unexpected ffprobe output for '{path}': {error}")
        return None

def find_tag(tags: dict[str, str], name: str) -> str | None:
    '''Case-insensitive tag lookup. Containers differ in how they capitalize tag keys.'''
    for key, value in tags.items():
        if key.lower() == name and value:
            return value
    return None

# Primary functions
def probe_mkv(path: str) -> Track | None:
    '''Reads a Matroska file's title and duration with ffprobe.

    Args:
        path: Absolute path of the file.

    Returns:
        The track, or None if ffprobe fails on the file.
    '''
    format_info = read_ffprobe_format(path)
    if format_info is None:
        return None

    duration_ms = 0
    try:
        duration_ms = seconds_to_ms(float(format_info.get('duration', 0)))
    except (ValueError, OverflowError):
        logging.debug(f"no valid duration for '{path}'")

    title = find_tag(format_info.get('tags', {}), 'title') or os.path.basename(path)
    return Track(path, title, duration_ms)

def probe_mp4(path: str) -> Track | None:
    '''Reads an MPEG-4 file's title and duration with mutagen.

    The embedded '\xa9nam' tag is used as the title when present, otherwise the file name.
    '''
    try:
        mp4 = MP4(path)
    except (MutagenError, OSError) as error:
        logging.debug(f"unable to read '{path}': {error}")
        return None

    title = os.path.basename(path)
    if mp4.tags is not None:
        names = mp4.tags.get('\xa9nam')
        if names:
            title = str(names[0])

    return Track(path, title, seconds_to_ms(mp4.info.length))

PROBES: dict[str, Callable[[str], Track | None]] = {
    constants.EXTENSION_MKV : probe_mkv,
    constants.EXTENSION_MP4 : probe_mp4,
}

def is_supported(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in PROBES

def probe(path: str) -> Track | None:
    '''Returns the track for a supported media file, or None if the file is unsupported or unreadable.'''
    extension = os.path.splitext(path)[1].lower()
    if extension not in PROBES:
        return None
    return PROBES[extension](path)
