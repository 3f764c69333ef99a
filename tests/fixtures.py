'''
Shared test fixtures for the mediatree test suite.

Import specific names into each test file rather than using wildcard imports.
'''

import os
import sys
import shlex

from mediatree.tree import Track, TrackRegistry, PendingTree

# Common mock paths shared across multiple test files
MOCK_ROOT       = '/mock/media'
MOCK_ROOT_OTHER = '/mock/other'
MOCK_OUTPUT     = '/mock/output/library.xspf'

# Stand-in ffprobe: echoes the file argument to stderr as raw bytes, writes STDOUT verbatim
FFPROBE_STUB_SCRIPT = '''import os
import sys
sys.stdout.buffer.write(STDOUT)
sys.stderr.buffer.write(os.fsencode(sys.argv[-1]) + b': Invalid data found when processing input\\n')
sys.exit(EXIT_CODE)
'''


def create_track(path: str, duration_ms: int = 1000) -> Track:
    '''Creates a track titled by the path's base name.'''
    return Track(path, path.rsplit('/', 1)[-1], duration_ms)


def build_pending(roots: list[str], paths: list[str]) -> tuple[TrackRegistry, PendingTree]:
    '''Registers each path in order, as the scanner would after a successful probe.'''
    registry = TrackRegistry()
    pending = PendingTree(roots)
    for path in paths:
        pending.register_file(path, registry.append(create_track(path)))
    return (registry, pending)


def create_ffprobe_stub(directory: str, stdout: bytes, exit_code: int) -> str:
    '''Writes a stand-in ffprobe script to `directory`. Returns a command line suitable for config.FFPROBE.'''
    script = os.path.join(directory, 'ffprobe_stub.py')
    with open(script, 'w', encoding='utf-8') as file:
        file.write(FFPROBE_STUB_SCRIPT.replace('STDOUT', repr(stdout)).replace('EXIT_CODE', str(exit_code)))
    return shlex.join([sys.executable, script])
