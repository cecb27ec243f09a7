"""Header component with the dashboard title and language toggle."""

import dash_bootstrap_components as dbc
from dash import html
import brand_colours as bc
from config.settings import UI_CONFIG
from models.translations import translate


def create_navbar(localization):
    """
    Creates the page header: title, source subtitle and the language toggle.

    Args:
        localization (dict): Localization entry for the initial language.

    Returns:
        html.Header: Configured header component
    """
    title_style = {
        "font-family": 'Open Sans',
        "font-weight": "700",
        "color": bc.PRIMARY_BLUE
    }

    toggle = dbc.Button(
        translate(localization, "language_toggle"),
        id="language-toggle",
        n_clicks=0,
        color="primary",
        outline=True,
        className="shadow-sm",
        style=UI_CONFIG["toggle_style"],
    )

    return html.Header(
        dbc.Row(
            [
                dbc.Col([
                    html.H1(translate(localization, "dashboard_title"), id="dashboard-title", style=title_style),
                    html.P(
                        translate(localization, "dashboard_subtitle"),
                        id="dashboard-subtitle",
                        className="mt-1 mb-0",
                        style=UI_CONFIG["subtitle_style"],
                    ),
                ], md=9),
                dbc.Col(toggle, md=3, className="d-flex justify-content-md-end align-items-center mt-3 mt-md-0"),
            ],
            align="center",
        ),
        className="mb-4",
    )
