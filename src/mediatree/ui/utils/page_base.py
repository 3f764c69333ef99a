'''Base utilities for building Streamlit pages with common patterns.'''

import streamlit as st
import logging
from types import ModuleType

from mediatree import common
from mediatree.ui.utils import utils


class PageBuilder:
    '''Builder pattern for creating Streamlit pages with standardized structure.

    Handles common patterns across pages:
    - Logging initialization
    - Module header and overview display
    - Standard section separators and headers

    Example:
        page = PageBuilder(module_name='playlist', module_ref=playlist)
        page.initialize_logging()
        page.render_header_and_overview()
    '''

    def __init__(self, module_name: str, module_ref: ModuleType):
        '''Initialize the page builder.

        Args:
            module_name: Name of the module (e.g., 'playlist')
            module_ref: Reference to the module object for accessing __doc__
        '''
        self.module_name = module_name
        self.module_ref = module_ref
        self.log_path = utils.create_file_path(module_name)

    def initialize_logging(self, level: int = logging.DEBUG) -> None:
        '''Configure logging for the page.

        Args:
            level: Logging level (default: logging.DEBUG)
        '''
        common.configure_log(level=level, path=str(self.log_path))

    def render_header_and_overview(self, expanded: bool = False) -> None:
        '''Render the module header and overview expander.

        Args:
            expanded: Whether the overview expander should be initially expanded
        '''
        st.header(f"{self.module_name} module")
        with st.expander('Overview', expanded=expanded):
            st.write(self.module_ref.__doc__)

    @staticmethod
    def create_center_context():
        '''Returns the middle column of a three-column layout, for centered buttons.'''
        _, center, _ = st.columns([1, 2, 1])
        return center

    @staticmethod
    def render_section_separator() -> None:
        '''Render a horizontal separator line.'''
        st.write('---')

    @staticmethod
    def render_arguments_header() -> None:
        '''Render the standard 'Arguments' section header.'''
        st.write('##### Arguments')

    @staticmethod
    def render_results_header() -> None:
        '''Render the standard 'Results' section header.'''
        st.write('##### Results')

    @staticmethod
    def render_run_button() -> bool:
        '''Render the primary run button. Returns True when clicked.'''
        with PageBuilder.create_center_context():
            return st.button('Run', type='primary', width='stretch')
