import streamlit as st
import pandas as pd
import os

from mediatree import common
from mediatree import playlist
from mediatree import xspf
from mediatree.ui.utils import utils
from mediatree.ui.utils.config import AppConfig
from mediatree.ui.utils.page_base import PageBuilder

# Constants
MODULE = 'playlist'
COLUMNS = ['Index', 'Title', 'Duration (ms)', 'Location']

# Page initialization
page = PageBuilder(module_name=MODULE, module_ref=playlist)
page.initialize_logging()
page.render_header_and_overview()

# Function arguments
page.render_arguments_header()

# Load app config
app_config = AppConfig.load()

# Render required arguments
roots = utils.render_paths_input('Root Directories', app_config.roots,
                                 'One directory per line. Each becomes a top-level folder in the playlist.')

# Render optional arguments
skip = utils.render_paths_input('Skipped Directories', app_config.skip,
                                'One directory per line, matched by exact path.')
output_path = st.text_input('Output Path', value=app_config.output_path or '')

# Separator between Arguments and Run sections
page.render_section_separator()

# Handle Run button
run_clicked = page.render_run_button()
if run_clicked:
    roots = [common.normalize_path(r) for r in roots]
    skip = [common.normalize_path(s) for s in skip]
    missing = [r for r in roots if not os.path.isdir(r)]

    if not roots:
        st.error('At least one root directory is required')
    elif missing:
        st.error(f"Not a directory: {', '.join(missing)}")
    else:
        with st.spinner('Scanning media files...'):
            registry, nodes = playlist.build(roots, skip)
            document = xspf.render(registry, nodes)

        # Write to disk when an output path is given
        if output_path:
            try:
                xspf.write(common.normalize_path(output_path), document)
                st.success(f'Wrote {len(registry)} tracks to {output_path}')
            except OSError as e:
                st.error(f'Unable to write playlist: {e}')
        else:
            st.success(f'Found {len(registry)} tracks')

        # Render results
        page.render_results_header()
        df = pd.DataFrame(
            [(index, track.title, track.duration_ms, track.location) for index, track in registry.items()],
            columns=COLUMNS
        )
        st.dataframe(df, hide_index=True, width='stretch')
        st.download_button('Download Playlist', data=document, file_name='library.xspf', mime='application/xspf+xml')

        # Update config to store the most recent working paths
        app_config.roots = roots
        app_config.skip = skip
        app_config.output_path = output_path or None
        AppConfig.save(app_config)
