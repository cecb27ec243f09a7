"""Visualization service: derived chart data and Plotly figures."""

import logging
from collections import namedtuple

import pandas as pd
import plotly.graph_objects as go

import brand_colours as bc
from config.settings import UI_CONFIG
from models.dataset import ENROLMENT_CATEGORIES
from models.translations import translate

# Configure logging
logger = logging.getLogger(__name__)

BarEntry = namedtuple("BarEntry", ["label", "value", "is_selected"])
BarSeries = namedtuple("BarSeries", ["category_label", "entries"])
DoughnutSlice = namedtuple("DoughnutSlice", ["label", "value", "color_index", "percent_label"])


def format_number(value, separator=","):
    """Formats an integer with thousands grouped by ``separator``."""
    return f"{int(value):,}".replace(",", separator)


def percent_of(value, total):
    """
    Integer percentage of ``value`` in ``total``, halves rounded up.

    Returns None when the total is zero.
    """
    if total == 0:
        return None
    return int(100 * value / total + 0.5)


def plotly_separators(thousands_separator):
    """Plotly ``separators`` layout value: decimal mark then thousands mark."""
    decimal = "." if thousands_separator == "," else ","
    return decimal + thousands_separator


def build_bar_series(dataset, localization, selected_name=None):
    """
    Builds the full-time undergraduate bar series.

    Every record produces exactly one entry, in dataset order.

    Args:
        dataset (tuple): Ordered UniversityRecord instances.
        localization (dict): Localization entry for the active language.
        selected_name (str or None): Name of the bar to emphasize.

    Returns:
        BarSeries: The localized category label and one BarEntry per record.
    """
    category_label = translate(localization, "ft_undergrad")
    entries = [
        BarEntry(record.name, record.ft_undergrad, record.name == selected_name)
        for record in dataset
    ]
    return BarSeries(category_label, entries)


def build_doughnut_slices(record, localization):
    """
    Builds the enrolment breakdown for one university.

    Categories with a value of exactly 0 are dropped. Colours are assigned by
    position in the remaining sequence, so a dropped middle category shifts
    the later ones down. Percentages are not adjusted to sum to 100.

    Args:
        record (UniversityRecord or None): The selected university.
        localization (dict): Localization entry for the active language.

    Returns:
        list: DoughnutSlice tuples, empty when there is no record or every
              category is zero.
    """
    if record is None:
        return []

    pairs = [
        (translate(localization, category), record.category_value(category))
        for category in ENROLMENT_CATEGORIES
    ]
    pairs = [(label, value) for label, value in pairs if value > 0]
    total = sum(value for _, value in pairs)
    if total == 0:
        return []

    return [
        DoughnutSlice(label, value, index, f"{percent_of(value, total)}%")
        for index, (label, value) in enumerate(pairs)
    ]


def doughnut_title(record, localization):
    """Card title for the breakdown chart, with the placeholder marker when needed."""
    if record is None:
        return translate(localization, "doughnut_chart_title")
    title = f"{translate(localization, 'doughnut_chart_title')} {record.name}"
    if record.is_placeholder:
        title += "*"
    return title


def build_enrolment_table(dataset, localization):
    """
    Tabulates the dataset with localized column headers for export.

    Args:
        dataset (tuple): Ordered UniversityRecord instances.
        localization (dict): Localization entry for the active language.

    Returns:
        pd.DataFrame: One row per university in dataset order.
    """
    columns = [translate(localization, "university")] + [
        translate(localization, category) for category in ENROLMENT_CATEGORIES
    ]
    rows = [
        [record.name] + [record.category_value(category) for category in ENROLMENT_CATEGORIES]
        for record in dataset
    ]
    return pd.DataFrame(rows, columns=columns)


def create_empty_figure():
    """A blank figure with hidden axes, used when there is nothing to draw."""
    fig = go.Figure()
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor=bc.WHITE,
        paper_bgcolor=bc.WHITE,
        height=UI_CONFIG["chart_height"],
        margin=dict(l=5, r=5, t=5, b=5),
    )
    return fig


def create_bar_chart(series, localization):
    """
    Creates the vertical bar chart of full-time undergraduate enrolment.

    The selected university is drawn in the darker blue. Clicking a bar
    reports its university name as ``points[0].x`` in the graph's clickData.

    Args:
        series (BarSeries): Output of build_bar_series.
        localization (dict): Localization entry for the active language.

    Returns:
        go.Figure: The bar chart, or an empty figure if the series has no entries.
    """
    if not series.entries:
        return create_empty_figure()

    enrolment = translate(localization, "enrolment")
    separator = translate(localization, "thousands_separator")

    fig = go.Figure(
        data=go.Bar(
            name=series.category_label,
            x=[entry.label for entry in series.entries],
            y=[entry.value for entry in series.entries],
            customdata=[format_number(entry.value, separator) for entry in series.entries],
            hovertemplate=f'<b>%{{x}}</b><br>{enrolment}: %{{customdata}}<extra></extra>',
            hoverlabel=dict(
                bgcolor=bc.WHITE,
                font_color=bc.TEXT_DARK,
                font_size=13,
                font_family='Open Sans',
                bordercolor=bc.BORDER_GREY
            ),
            marker=dict(
                color=[bc.SELECTED_BAR if entry.is_selected else bc.UNSELECTED_BAR for entry in series.entries],
                cornerradius=4
            )
        )
    )

    fig.update_layout(
        showlegend=False,
        xaxis_title=None,
        yaxis_title=None,
        height=UI_CONFIG["chart_height"],
        margin=dict(l=5, r=20, t=10, b=5),
        clickmode='event',
        separators=plotly_separators(separator),
        plot_bgcolor=bc.WHITE,
        paper_bgcolor=bc.WHITE,
        font=dict(
            color=bc.AXIS_GREY,
            family='Open Sans'
        ),
        modebar_remove=['zoom', 'pan', 'select', 'zoomIn', 'zoomOut', 'autoScale', 'resetScale', 'lasso2d']
    )
    fig.update_xaxes(tickfont=dict(size=12))
    fig.update_yaxes(tickformat=',', gridcolor=bc.BORDER_GREY)

    return fig


def create_doughnut_chart(slices, localization):
    """
    Creates the enrolment breakdown doughnut chart.

    Slice order and colours come straight from the slices; Plotly sorting is
    disabled so they stay stable across languages and selections.

    Args:
        slices (list): Output of build_doughnut_slices.
        localization (dict): Localization entry for the active language.

    Returns:
        go.Figure: The doughnut chart, or an empty figure when there are no slices.
    """
    if not slices:
        return create_empty_figure()

    separator = translate(localization, "thousands_separator")
    colours = [bc.SLICE_COLOURS[s.color_index % len(bc.SLICE_COLOURS)] for s in slices]

    fig = go.Figure(
        data=go.Pie(
            labels=[s.label for s in slices],
            values=[s.value for s in slices],
            text=[s.percent_label for s in slices],
            textinfo='text',
            textfont=dict(color=bc.WHITE, size=13, family='Open Sans'),
            customdata=[format_number(s.value, separator) for s in slices],
            hovertemplate='%{label}: %{customdata}<extra></extra>',
            hole=0.5,
            sort=False,
            direction='clockwise',
            marker=dict(colors=colours, line=dict(color=bc.WHITE, width=3))
        )
    )

    fig.update_layout(
        showlegend=True,
        legend=dict(orientation='h', yanchor='top', y=-0.05, xanchor='center', x=0.5),
        height=UI_CONFIG["chart_height"],
        margin=dict(l=5, r=5, t=10, b=5),
        separators=plotly_separators(separator),
        paper_bgcolor=bc.WHITE,
        font=dict(
            color=bc.TEXT_DARK,
            family='Open Sans'
        ),
    )

    return fig
