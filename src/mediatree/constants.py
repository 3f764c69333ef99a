# project data
from pathlib import Path
PROJECT_ROOT = Path(__file__).parent.parent.parent

# file information
EXTENSION_MKV = '.mkv'
EXTENSION_MP4 = '.mp4'

# XSPF document
PLAYLIST_TITLE = 'Media Library'
FILE_SCHEME    = 'file://'
URL_SAFE_CHARS = '/'

XML_HEADER     = '<?xml version="1.0" encoding="UTF-8"?>'
NAMESPACE_XSPF = 'http://xspf.org/ns/0/'
NAMESPACE_VLC  = 'http://www.videolan.org/vlc/playlist/ns/0/'
VLC_APPLICATION = 'http://www.videolan.org/vlc/playlist/0'

## xml references
TAG_PLAYLIST   = 'playlist'
TAG_TITLE      = 'title'
TAG_TRACK_LIST = 'trackList'
TAG_TRACK      = 'track'
TAG_LOCATION   = 'location'
TAG_DURATION   = 'duration'
TAG_EXTENSION  = 'extension'
TAG_VLC_ID     = 'vlc:id'
TAG_VLC_NODE   = 'vlc:node'
TAG_VLC_ITEM   = 'vlc:item'

ATTR_TITLE       = 'title'
ATTR_TRACK_ID    = 'tid'
ATTR_APPLICATION = 'application'
