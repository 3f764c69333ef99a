import streamlit as st
from mediatree import constants
from mediatree.ui.utils.config import AppConfig

def create_file_path(module_name: str) -> str:
    relative_path = f"src/mediatree/{module_name}.py"
    return str(constants.PROJECT_ROOT / relative_path)

def render_paths_input(label: str, config_value: list[str], help_text: str = '') -> list[str]:
    '''Renders a text area holding one path per line, prefilled from config.

    Args:
        label: The label to display for the input field
        config_value: Paths from app config
        help_text: Tooltip for the input

    Returns:
        The non-empty, stripped lines entered by the user
    '''
    value = st.text_area(label, value='\n'.join(config_value), help=help_text or None)
    return AppConfig.parse_paths(value)
