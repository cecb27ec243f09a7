"""Layout model for the enrolment dashboard."""

import dash_bootstrap_components as dbc
from dash import html, dcc
import brand_colours as bc
from config.settings import APP_CONFIG, UI_CONFIG
from components import create_navbar, create_chart_card
from models.translations import translate
from services.state_service import SelectionStateManager
from services.visualization_service import doughnut_title


def create_app_layout(manager=None):
    """
    Creates the main application layout: header, the two chart cards,
    the export button and the selection store.

    The store is memory-backed, so every page load starts again from the
    default selection.

    Args:
        manager (SelectionStateManager or None): Initial state. Defaults to a
                                                 fresh manager.

    Returns:
        dash.html.Div: The complete application layout
    """
    if manager is None:
        manager = SelectionStateManager()
    localization = manager.localization

    header = create_navbar(localization)

    bar_card = create_chart_card(
        "graph-enrolment",
        "bar-chart-title",
        title=translate(localization, "bar_chart_title"),
        subtitle_id="bar-chart-subtitle",
        subtitle=translate(localization, "bar_chart_subtitle"),
    )
    doughnut_card = create_chart_card(
        "graph-breakdown",
        "doughnut-chart-title",
        title=doughnut_title(manager.selected_record, localization),
    )

    placeholder_note = html.Div(
        translate(localization, "placeholder_note"),
        id="placeholder-note",
        style={**UI_CONFIG["subtitle_style"], "display": "block" if manager.selected_record.is_placeholder else "none"},
    )

    download = html.Div([
        dbc.Button(
            translate(localization, "download_label"),
            id="download-button",
            n_clicks=0,
            color="secondary",
            outline=True,
            size="sm",
        ),
        dcc.Download(id="download-data"),
    ], className="mt-2")

    footer = html.Footer(
        html.P(APP_CONFIG["footer_text"]),
        className="text-center mt-5",
        style={"color": bc.AXIS_GREY, "font-size": "13px"},
    )

    return html.Div([
        dcc.Store(id="selection-state", storage_type="memory", data=manager.to_dict()),
        dbc.Container([
            header,
            html.Main(
                dbc.Row([
                    dbc.Col([bar_card, download], lg=7),
                    dbc.Col([doughnut_card, placeholder_note], lg=5),
                ], className="g-4")
            ),
            footer,
        ], className="p-4"),
    ], style={
        "background-color": bc.BACKGROUND,
        "min-height": "100vh",
        "font-family": UI_CONFIG["font_family"],
    })
