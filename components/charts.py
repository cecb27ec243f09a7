"""Chart card components for the dashboard."""

import dash_bootstrap_components as dbc
from dash import dcc, html
from config.settings import UI_CONFIG


def create_chart_card(chart_id, title_id, title="", subtitle_id=None, subtitle="", spinner=True):
    """
    Creates a card containing a chart with an updatable title and optional subtitle.

    The title and subtitle are rendered with their own IDs so the language
    callback can rewrite them without rebuilding the card.

    Args:
        chart_id (str): The ID for the dcc.Graph component
        title_id (str): The ID for the card title
        title (str): Initial title text
        subtitle_id (str or None): The ID for the subtitle, or None for no subtitle
        subtitle (str): Initial subtitle text
        spinner (bool): Whether to wrap the chart in a loading spinner

    Returns:
        dbc.Card: Card component with chart
    """
    header_children = [html.Div(title, id=title_id, className="text-truncate")]
    if subtitle_id is not None:
        header_children.append(html.Div(subtitle, id=subtitle_id, style=UI_CONFIG["subtitle_style"]))

    chart_content = dcc.Graph(
        id=chart_id,
        config={'displaylogo': False},
        style={'height': f'{UI_CONFIG["chart_height"]}px'}
    )

    if spinner:
        chart_content = dbc.Spinner(
            chart_content,
            color="primary",
            type="border",
        )

    return dbc.Card([
        dbc.CardHeader(header_children, style=UI_CONFIG["card_header_style"], className="bg-white border-0"),
        dbc.CardBody([chart_content])
    ], className="shadow-sm rounded-3 mb-4 h-100")
