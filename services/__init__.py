"""Services package initialization."""

from services.state_service import SelectionStateManager, SelectionState, SelectUniversity, SetLanguage, ToggleLanguage
from services.visualization_service import (
    build_bar_series, build_doughnut_slices, build_enrolment_table,
    create_bar_chart, create_doughnut_chart, doughnut_title, format_number
)

__all__ = [
    'SelectionStateManager',
    'SelectionState',
    'SelectUniversity',
    'SetLanguage',
    'ToggleLanguage',
    'build_bar_series',
    'build_doughnut_slices',
    'build_enrolment_table',
    'create_bar_chart',
    'create_doughnut_chart',
    'doughnut_title',
    'format_number'
]
