import pytest
from dash.exceptions import PreventUpdate

import brand_colours as bc
from controllers.callbacks import (
    BAR_CHART_ID, TOGGLE_ID, apply_interaction, command_for_trigger, render_views
)
from services.state_service import SelectionStateManager, SelectUniversity, ToggleLanguage


def click(name):
    return {'points': [{'curveNumber': 0, 'pointNumber': 0, 'x': name, 'y': 1}]}


def test_bar_click_becomes_select_command():
    assert command_for_trigger(BAR_CHART_ID, click('Brock University')) == SelectUniversity('Brock University')


def test_toggle_click_becomes_toggle_command():
    assert command_for_trigger(TOGGLE_ID, None) == ToggleLanguage()


def test_unrelated_triggers_have_no_command():
    assert command_for_trigger(BAR_CHART_ID, None) is None
    assert command_for_trigger('download-button', None) is None
    assert command_for_trigger(None, None) is None


def test_bar_click_selects_carleton_and_updates_breakdown():
    initial = SelectionStateManager().to_dict()
    assert initial['selected_university_name'] == 'Algoma University'

    new_state = apply_interaction(BAR_CHART_ID, click('Carleton University'), initial)
    assert new_state['selected_university_name'] == 'Carleton University'

    views = render_views(new_state)
    pie = views[7].data[0]
    assert list(pie.values) == [19600, 3900, 5500]
    assert list(pie.text) == ['68%', '13%', '19%']
    assert views[6] == 'Enrolment Breakdown for Carleton University'


def test_toggle_switches_language_and_back():
    state = SelectionStateManager().to_dict()
    state = apply_interaction(TOGGLE_ID, None, state)
    assert state['language_code'] == 'fr'
    state = apply_interaction(TOGGLE_ID, None, state)
    assert state['language_code'] == 'en'


def test_unknown_bar_keeps_selection():
    state = SelectionStateManager().to_dict()
    with pytest.raises(PreventUpdate):
        apply_interaction(BAR_CHART_ID, click('Nonexistent University'), state)


def test_clicking_selected_bar_is_not_an_update():
    state = SelectionStateManager().to_dict()
    with pytest.raises(PreventUpdate):
        apply_interaction(BAR_CHART_ID, click('Algoma University'), state)


def test_trigger_without_command_is_not_an_update():
    with pytest.raises(PreventUpdate):
        apply_interaction('download-button', None, None)


def test_render_views_in_french():
    state = {'language_code': 'fr', 'selected_university_name': 'Brock University'}
    (title, subtitle, toggle, bar_title, bar_subtitle, bar_fig, doughnut_title,
     doughnut_fig, note, note_style, download) = render_views(state)
    assert title == 'Tableau de Bord des Inscriptions Universitaires Canadiennes'
    assert toggle == 'English'
    assert bar_title == 'Inscriptions de Premier Cycle à Temps Plein'
    assert doughnut_title == 'Répartition des Inscriptions pour Brock University'
    assert list(bar_fig.data[0].marker.color) == [bc.UNSELECTED_BAR, bc.UNSELECTED_BAR, bc.SELECTED_BAR, bc.UNSELECTED_BAR]
    assert list(doughnut_fig.data[0].labels) == ['1er cycle TP', '2e/3e cycle TP', '1er cycle TPartiel']
    assert note_style['display'] == 'none'
    assert download.startswith('Télécharger')


def test_render_views_shows_placeholder_note_for_brescia():
    state = {'language_code': 'en', 'selected_university_name': 'Brescia University College'}
    views = render_views(state)
    assert views[8] == '* Placeholder figures'
    assert views[9]['display'] == 'block'
    assert len(views[7].data[0].labels) == 2


def test_render_views_with_empty_store_uses_defaults():
    views = render_views(None)
    assert views[0] == 'Canadian University Enrolment Dashboard'
    assert views[6] == 'Enrolment Breakdown for Algoma University'
