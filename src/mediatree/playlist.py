'''
# Summary
Scans media directories and writes an XSPF playlist that mirrors their folder structure.

    - walk:      Yields the supported media files below a root, in sorted order.
    - scan:      Probes each walked file and stages the readable ones into the playlist tree.
    - generate:  Runs a full scan and renders the playlist document.

Each root given with --root becomes a top-level folder in the playlist.
Files that can't be read are left out. If no --output is given the playlist is printed.
'''

import argparse
import os
import sys
import stat
import logging
from typing import Callable, Iterator

from . import common
from . import probe
from . import xspf
from .tree import Track, TrackRegistry, PendingTree, PlaylistNode, sort_nodes

# command support
class Namespace(argparse.Namespace):
    '''Command-line arguments for playlist module.'''

    # Required
    root: list[str]

    # Optional (alphabetical)
    output: str | None
    skip: list[str]

def parse_args(argv: list[str]) -> Namespace:
    '''Parse command line arguments.

    Args:
        argv: Argument list, without the program name
    '''
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)

    # Required
    parser.add_argument('--root', '-r', type=str, action='append', required=True,
                        help='Directory to scan recursively for mkv and mp4 files. Repeat for multiple roots.')

    # Optional (alphabetical)
    parser.add_argument('--output', '-o', type=str,
                        help='File to write the playlist to. Printed to stdout if omitted.')
    parser.add_argument('--skip', '-s', type=str, action='append', default=[],
                        help='Directory to leave out of the scan, matched by exact path. Repeatable.')

    # Parse into Namespace
    args = parser.parse_args(argv, namespace=Namespace())

    # Normalize paths (only if not None)
    common.normalize_arg_paths(args, ['root', 'output', 'skip'])

    # Validate roots
    for root in args.root:
        if not os.path.isdir(root):
            parser.error(f"--root '{root}' is not a directory")

    return args

# Primary functions
def is_regular_file(path: str) -> bool:
    '''True if `path` is a regular file. Symbolic links are not followed; unreadable entries are False.'''
    try:
        return stat.S_ISREG(os.lstat(path).st_mode)
    except OSError as error:
        logging.debug(f"skip unreadable entry '{path}': {error}")
        return False

def walk(root: str, skip: set[str]) -> Iterator[str]:
    '''Yields the path of every supported media file below `root`.

    Directories and files are visited in sorted name order. Directories listed in `skip`
    are not entered; if `root` itself is listed nothing is yielded.

    Args:
        root: Absolute, normalized directory path
        skip: Absolute, normalized directory paths to exclude
    '''
    if root in skip:
        logging.info(f"skip root: '{root}'")
        return

    for working_dir, dirnames, filenames in os.walk(root):
        # prune skipped directories before os.walk descends into them
        dirnames[:] = sorted(d for d in dirnames if os.path.join(working_dir, d) not in skip)

        for name in sorted(filenames):
            path = os.path.join(working_dir, name)
            if probe.is_supported(path) and is_regular_file(path):
                yield path

def scan(roots: list[str],
         skip: list[str],
         probe_fn: Callable[[str], Track | None] | None = None) -> tuple[TrackRegistry, PendingTree]:
    '''Walks each root, probes the media files found and stages every readable one.

    Args:
        roots: Absolute, normalized root directories
        skip: Absolute, normalized directories to exclude
        probe_fn: Reads a file's metadata, returning None when it can't (default: probe.probe)

    Returns:
        Tuple of (track registry, staged tree)
    '''
    probe_fn = probe_fn or probe.probe
    registry = TrackRegistry()
    pending = PendingTree(roots)
    skip_set = set(skip)

    for root in pending.roots:
        logging.info(f"scan root: '{root}'")
        for path in walk(root, skip_set):
            # overlapping roots reach the same file more than once
            if path in pending:
                logging.debug(f"skip already registered file: '{path}'")
                continue

            track = probe_fn(path)
            if track is None:
                logging.debug(f"skip unreadable media: '{path}'")
                continue

            pending.register_file(path, registry.append(track))

    logging.info(f"found {len(registry)} tracks in {len(pending.roots)} roots")
    return (registry, pending)

def build(roots: list[str], skip: list[str]) -> tuple[TrackRegistry, list[PlaylistNode]]:
    '''Scans the roots and returns the registry with the sorted playlist tree.'''
    registry, pending = scan(roots, skip)
    nodes = pending.materialize()
    sort_nodes(nodes)
    return (registry, nodes)

def generate(roots: list[str], skip: list[str]) -> bytes:
    '''Scans the given root directories and renders the XSPF playlist document.

    Args:
        roots: Absolute, normalized root directories
        skip: Absolute, normalized directories to exclude
    '''
    registry, nodes = build(roots, skip)
    return xspf.render(registry, nodes)

def write_output(document: bytes, output: str | None) -> None:
    '''Writes the document to `output`, or prints it when no output path is given.'''
    if output:
        xspf.write(output, document)
    else:
        print(xspf.to_text(document))

# Main
def main(argv: list[str]) -> None:
    common.configure_log_module(__file__, level=logging.DEBUG)
    script_args = parse_args(argv[1:])

    document = generate(script_args.root, script_args.skip)
    try:
        write_output(document, script_args.output)
    except OSError as error:
        logging.error(f"fatal: unable to write playlist to '{script_args.output}': {error}")
        print(f"error: unable to write playlist to '{script_args.output}': {error}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as error:
        logging.error(f"fatal: playlist is not valid UTF-8 text: {error}")
        print(f"error: playlist is not valid UTF-8 text: {error}", file=sys.stderr)
        sys.exit(1)

if __name__ == '__main__':
    main(sys.argv)
