'''
# Summary
Renders a track registry and its playlist tree as an XSPF document with the VLC extension.

# Format
    The flat <trackList> holds one <track> per registry entry, in registry order.
    The trailing <extension> block mirrors the directory structure with nested <vlc:node>
    elements and one <vlc:item tid="..."/> per file. Each `tid` matches the `vlc:id` of a track.

    Indentation uses tabs, one per nesting level.
'''

import html
import logging
from urllib.parse import quote

from . import constants
from .tree import TrackRegistry, PlaylistNode, Directory

# constants
PLAYLIST_START_TAG = (f'<{constants.TAG_PLAYLIST} xmlns="{constants.NAMESPACE_XSPF}"'
                      f' xmlns:vlc="{constants.NAMESPACE_VLC}" version="1">')
PLAYLIST_END_TAG    = f'</{constants.TAG_PLAYLIST}>'
EXTENSION_START_TAG = f'<{constants.TAG_EXTENSION} {constants.ATTR_APPLICATION}="{constants.VLC_APPLICATION}">'
EXTENSION_END_TAG   = f'</{constants.TAG_EXTENSION}>'

# helper functions
def element(tag: str, content: str | int) -> str:
    return f"<{tag}>{content}</{tag}>"

def escape_text(value: str) -> str:
    '''Escapes the markup characters & < > " ' in `value`.'''
    return html.escape(value, quote=True)

def location_uri(path: str) -> str:
    '''Returns the file URI for an absolute path, with each path segment percent-encoded.

    Example:
        >>> location_uri('/media/Films & Shows/a b.mkv')
        'file:///media/Films%20%26%20Shows/a%20b.mkv'
    '''
    return f"{constants.FILE_SCHEME}{quote(path, safe=constants.URL_SAFE_CHARS, errors='surrogateescape')}"

def render_tracks(registry: TrackRegistry) -> list[str]:
    '''Returns the lines of the <trackList> section.'''
    lines = [f"\t<{constants.TAG_TRACK_LIST}>"]
    for index, track in registry.items():
        lines += [
            f"\t\t<{constants.TAG_TRACK}>",
            f"\t\t\t{element(constants.TAG_LOCATION, location_uri(track.location))}",
            f"\t\t\t{element(constants.TAG_TITLE, escape_text(track.title))}",
            f"\t\t\t{element(constants.TAG_DURATION, track.duration_ms)}",
            f"\t\t\t{EXTENSION_START_TAG}",
            f"\t\t\t\t{element(constants.TAG_VLC_ID, index)}",
            f"\t\t\t{EXTENSION_END_TAG}",
            f"\t\t</{constants.TAG_TRACK}>",
        ]
    lines.append(f"\t</{constants.TAG_TRACK_LIST}>")
    return lines

def render_nodes(nodes: list[PlaylistNode], depth: int) -> list[str]:
    '''Returns the lines for `nodes` and everything below them, indented `depth` tabs.'''
    indent = '\t' * depth
    lines: list[str] = []
    for node in nodes:
        if isinstance(node, Directory):
            lines.append(f'{indent}<{constants.TAG_VLC_NODE} {constants.ATTR_TITLE}="{escape_text(node.title)}">')
            lines += render_nodes(node.children, depth + 1)
            lines.append(f"{indent}</{constants.TAG_VLC_NODE}>")
        else:
            lines.append(f'{indent}<{constants.TAG_VLC_ITEM} {constants.ATTR_TRACK_ID}="{node.index}"/>')
    return lines

# Primary functions
def render(registry: TrackRegistry, nodes: list[PlaylistNode]) -> bytes:
    '''Renders the full playlist document as UTF-8 bytes.

    Args:
        registry: Tracks in index order.
        nodes: The sorted playlist tree, one top-level node per root.

    Returns:
        The document, each line terminated by a newline.
    '''
    lines = [
        constants.XML_HEADER,
        PLAYLIST_START_TAG,
        f"\t{element(constants.TAG_TITLE, constants.PLAYLIST_TITLE)}",
    ]
    lines += render_tracks(registry)
    lines.append(f"\t{EXTENSION_START_TAG}")
    lines += render_nodes(nodes, 2)
    lines.append(f"\t{EXTENSION_END_TAG}")
    lines.append(PLAYLIST_END_TAG)

    logging.debug(f"rendered {len(registry)} tracks in {len(lines)} lines")
    return ''.join(f"{line}\n" for line in lines).encode('utf-8', 'surrogateescape')

def to_text(document: bytes) -> str:
    '''Decodes a rendered document for console output. Raises UnicodeDecodeError on invalid UTF-8.'''
    return document.decode('utf-8')

def write(path: str, document: bytes) -> None:
    '''Writes a rendered document to `path`, replacing any existing file.'''
    with open(path, 'wb') as file:
        file.write(document)
    logging.info(f"wrote playlist to '{path}'")
