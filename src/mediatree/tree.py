'''
# Summary
Builds the playlist hierarchy from discovered media files.

    - TrackRegistry:  Append-only list of tracks. A track's position is its permanent index.
    - PendingTree:    Path-keyed staging map, filled one file at a time in walk order.
    - materialize:    Resolves the staging map into Directory/Leaf nodes, one per root.
    - sort_nodes:     Orders siblings at every level: directories first, then files, each by name.

# Assumptions
* Every registered file lives below one of the configured roots.
* Paths are absolute and normalized, so each directory has exactly one key in the staging map.
'''

import os
import logging
from dataclasses import dataclass, field
from typing import Iterator

# classes
@dataclass(frozen=True)
class Track:
    '''Metadata for a single accepted media file.'''
    location: str
    title: str
    duration_ms: int = 0

class TrackRegistry:
    '''Ordered, append-only collection of tracks.

    The index returned by `append` identifies the track for the lifetime of the registry
    and is the value written as both `vlc:id` and `tid` in the rendered playlist.
    '''

    def __init__(self) -> None:
        self._tracks: list[Track] = []

    def append(self, track: Track) -> int:
        '''Adds `track` and returns its index.'''
        index = len(self._tracks)
        self._tracks.append(track)
        return index

    def __len__(self) -> int:
        return len(self._tracks)

    def __getitem__(self, index: int) -> Track:
        return self._tracks[index]

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def items(self) -> Iterator[tuple[int, Track]]:
        '''Yields (index, track) pairs in registry order.'''
        return enumerate(self._tracks)

# staging nodes
@dataclass
class PendingDirectory:
    title: str
    child_paths: list[str] = field(default_factory=list)

@dataclass(frozen=True)
class PendingFile:
    index: int
    name: str

# realized nodes
@dataclass
class Directory:
    title: str
    children: list['PlaylistNode'] = field(default_factory=list)

@dataclass(frozen=True)
class Leaf:
    index: int
    name: str

PlaylistNode = Directory | Leaf

class PendingTree:
    '''Staging map from absolute path to pending directory or file.

    Roots are registered up front. Each file registration creates whatever ancestor
    directories are still missing and links every new node into its parent.

    Example:
        pending = PendingTree(['/media/movies'])
        pending.register_file('/media/movies/2001/film.mkv', 0)
        nodes = pending.materialize()
    '''

    def __init__(self, roots: list[str]) -> None:
        self.nodes: dict[str, PendingDirectory | PendingFile] = {}
        self.roots: list[str] = []

        for root in roots:
            if root in self.nodes:
                logging.warning(f"ignoring duplicate root '{root}'")
                continue
            self.roots.append(root)
            self.nodes[root] = PendingDirectory(os.path.basename(root))

    def __contains__(self, path: str) -> bool:
        return path in self.nodes

    def _directory_of(self, path: str) -> PendingDirectory:
        '''Returns the parent directory node of `path`, creating missing ancestors on the way.

        Args:
            path: Path of the node that is about to be added to its parent.
        '''
        parent_path = os.path.dirname(path)
        if parent_path == path:
            raise ValueError(f"'{path}' is not below any registered root")

        if parent_path not in self.nodes:
            self.nodes[parent_path] = PendingDirectory(os.path.basename(parent_path))
            logging.debug(f"create directory node: '{parent_path}'")
            self._directory_of(parent_path).child_paths.append(parent_path)

        parent = self.nodes[parent_path]
        if not isinstance(parent, PendingDirectory):
            raise ValueError(f"ancestor '{parent_path}' of '{path}' is registered as a file")
        return parent

    def register_file(self, path: str, index: int) -> None:
        '''Adds the file at `path` as a leaf referencing track `index`.

        Args:
            path: Absolute, normalized path of an accepted media file.
            index: The track's index in the registry.
        '''
        name = os.path.basename(path)
        if not name:
            raise ValueError(f"no file name in path '{path}'")
        if path in self.nodes:
            raise ValueError(f"path already registered: '{path}'")

        self._directory_of(path).child_paths.append(path)
        self.nodes[path] = PendingFile(index, name)

    def materialize(self) -> list[PlaylistNode]:
        '''Resolves this staging map into playlist nodes, one per root.'''
        return materialize(self.roots, self.nodes)

# Primary functions
def _resolve(path: str, nodes: dict[str, PendingDirectory | PendingFile]) -> PlaylistNode:
    node = nodes[path]
    if isinstance(node, PendingFile):
        return Leaf(node.index, node.name)
    return Directory(node.title, [_resolve(child, nodes) for child in node.child_paths])

def materialize(roots: list[str], nodes: dict[str, PendingDirectory | PendingFile]) -> list[PlaylistNode]:
    '''Builds the playlist tree for each root from the staging map.

    The staging map is only read. Children keep their registration order until sorted.

    Args:
        roots: Root paths, in configured order.
        nodes: Staging map produced by a PendingTree.
    '''
    return [_resolve(root, nodes) for root in roots]

def sort_key(node: PlaylistNode) -> tuple[int, bytes]:
    '''Directories sort before leaves; names compare by their filesystem bytes.'''
    if isinstance(node, Directory):
        return (0, node.title.encode('utf-8', 'surrogateescape'))
    return (1, node.name.encode('utf-8', 'surrogateescape'))

def sort_nodes(nodes: list[PlaylistNode]) -> None:
    '''Sorts `nodes` in place, then the children of every directory below them.'''
    nodes.sort(key=sort_key)
    for node in nodes:
        if isinstance(node, Directory):
            sort_nodes(node.children)

def leaf_indices(nodes: list[PlaylistNode]) -> list[int]:
    '''Returns the track index of every leaf below `nodes`, depth first.'''
    indices: list[int] = []
    for node in nodes:
        if isinstance(node, Leaf):
            indices.append(node.index)
        else:
            indices.extend(leaf_indices(node.children))
    return indices
