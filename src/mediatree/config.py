'''
Runtime configuration loaded from environment variables with production defaults.

Import this module instead of constants.py for any configurable value.
For testing, set environment variables before running tests:

    export MEDIATREE_LOG_DIR=/tmp/mediatree_test/logs
    export MEDIATREE_FFPROBE=/opt/ffmpeg/bin/ffprobe
'''

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(os.getenv('MEDIATREE_PROJECT_ROOT', str(Path(__file__).parent.parent.parent)))
LOG_DIR      = Path(os.getenv('MEDIATREE_LOG_DIR', str(PROJECT_ROOT / 'logs')))

# External tools
FFPROBE = os.getenv('MEDIATREE_FFPROBE', 'ffprobe')

