"""Controllers for application callbacks."""

import logging

from dash import callback_context, dcc, Output, Input, State
from dash.exceptions import PreventUpdate

from config.settings import UI_CONFIG
from models.translations import translate
from services.state_service import SelectionStateManager, SelectUniversity, ToggleLanguage
from services.visualization_service import (
    build_bar_series, build_doughnut_slices, build_enrolment_table,
    create_bar_chart, create_doughnut_chart, doughnut_title
)
from utils.helper_utils import CallbackContextManager, monitor_performance, extract_clicked_value

# Configure logging
logger = logging.getLogger(__name__)

BAR_CHART_ID = "graph-enrolment"
TOGGLE_ID = "language-toggle"


def command_for_trigger(triggered_id, click_data):
    """
    Translates the component that fired into a state command.

    Args:
        triggered_id (str or None): ID of the triggering component.
        click_data (dict or None): clickData of the bar chart.

    Returns:
        SelectUniversity, ToggleLanguage or None when the trigger carries no command.
    """
    if triggered_id == TOGGLE_ID:
        return ToggleLanguage()
    if triggered_id == BAR_CHART_ID:
        name = extract_clicked_value(click_data)
        if name is not None:
            return SelectUniversity(name)
    return None


def apply_interaction(triggered_id, click_data, state_data):
    """
    Applies one user interaction to the stored selection state.

    Args:
        triggered_id (str or None): ID of the triggering component.
        click_data (dict or None): clickData of the bar chart.
        state_data (dict or None): Current contents of the selection store.

    Returns:
        dict: The new store contents.

    Raises:
        PreventUpdate: When the interaction leaves the state unchanged.
    """
    command = command_for_trigger(triggered_id, click_data)
    if command is None:
        raise PreventUpdate
    manager = SelectionStateManager.from_dict(state_data)
    if not manager.dispatch(command):
        raise PreventUpdate
    return manager.to_dict()


def render_views(state_data):
    """
    Derives every localized text and both figures from the stored state.

    Args:
        state_data (dict or None): Contents of the selection store.

    Returns:
        tuple: (title, subtitle, toggle label, bar chart title, bar chart subtitle,
                bar figure, doughnut title, doughnut figure, placeholder note,
                placeholder note style, download label)
    """
    manager = SelectionStateManager.from_dict(state_data)
    localization = manager.localization
    record = manager.selected_record

    series = build_bar_series(manager.dataset, localization, manager.selected_university_name)
    slices = build_doughnut_slices(record, localization)

    note_style = {
        **UI_CONFIG["subtitle_style"],
        "display": "block" if record is not None and record.is_placeholder else "none",
    }

    return (
        translate(localization, "dashboard_title"),
        translate(localization, "dashboard_subtitle"),
        translate(localization, "language_toggle"),
        translate(localization, "bar_chart_title"),
        translate(localization, "bar_chart_subtitle"),
        create_bar_chart(series, localization),
        doughnut_title(record, localization),
        create_doughnut_chart(slices, localization),
        translate(localization, "placeholder_note"),
        note_style,
        translate(localization, "download_label"),
    )


def register_callbacks(app):
    """
    Register all Dash callbacks for the application.

    Args:
        app: The Dash application instance
    """

    @app.callback(
        Output("selection-state", "data"),
        Input(BAR_CHART_ID, "clickData"),
        Input(TOGGLE_ID, "n_clicks"),
        State("selection-state", "data"),
        prevent_initial_call=True,
    )
    @monitor_performance
    def update_selection_state(click_data, toggle_clicks, state_data):
        """Turn a bar click or toggle click into a new selection state"""
        ctx = CallbackContextManager(callback_context)
        if not ctx.is_triggered:
            raise PreventUpdate
        return apply_interaction(ctx.triggered_id, click_data, state_data)

    @app.callback(
        Output("dashboard-title", "children"),
        Output("dashboard-subtitle", "children"),
        Output(TOGGLE_ID, "children"),
        Output("bar-chart-title", "children"),
        Output("bar-chart-subtitle", "children"),
        Output(BAR_CHART_ID, "figure"),
        Output("doughnut-chart-title", "children"),
        Output("graph-breakdown", "figure"),
        Output("placeholder-note", "children"),
        Output("placeholder-note", "style"),
        Output("download-button", "children"),
        Input("selection-state", "data"),
    )
    @monitor_performance
    def render_dashboard(state_data):
        """Redraw both charts and all text for the current state"""
        return render_views(state_data)

    @app.callback(
        Output("download-data", "data"),
        Input("download-button", "n_clicks"),
        State("selection-state", "data"),
        prevent_initial_call=True,
    )
    def download_enrolment_data(n_clicks, state_data):
        """Download the enrolment table as CSV in the active language"""
        if not n_clicks:
            raise PreventUpdate
        manager = SelectionStateManager.from_dict(state_data)
        table = build_enrolment_table(manager.dataset, manager.localization)
        filename = f"enrolment_{manager.language_code}.csv"
        logger.info(f"Exporting {len(table)} rows to {filename}")
        return dcc.send_data_frame(table.to_csv, filename, index=False)
