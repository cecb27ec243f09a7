import logging

import pytest

from models.dataset import UNIVERSITY_DATA, UniversityRecord
from models.errors import InvalidLanguageError, UniversityNotFoundError
from services.state_service import (
    SelectionState, SelectionStateManager, SelectUniversity, SetLanguage, ToggleLanguage
)


@pytest.fixture
def manager():
    return SelectionStateManager()


def test_initial_state(manager):
    assert manager.language_code == 'en'
    assert manager.selected_university_name == UNIVERSITY_DATA[0].name == 'Algoma University'
    assert manager.selected_record is UNIVERSITY_DATA[0]


def test_set_language(manager):
    manager.set_language('fr')
    assert manager.language_code == 'fr'
    assert manager.localization['language_toggle'] == 'English'


def test_set_language_rejects_unsupported_code(manager):
    with pytest.raises(InvalidLanguageError) as excinfo:
        manager.set_language('de')
    assert isinstance(excinfo.value, ValueError)
    assert manager.language_code == 'en'


def test_toggle_language_twice_returns_to_start(manager):
    manager.toggle_language()
    assert manager.language_code == 'fr'
    manager.toggle_language()
    assert manager.language_code == 'en'


def test_toggle_cycles_through_more_languages():
    translations = {'en': {}, 'fr': {}, 'es': {}}
    manager = SelectionStateManager(translations=translations)
    seen = []
    for _ in range(4):
        manager.toggle_language()
        seen.append(manager.language_code)
    assert seen == ['fr', 'es', 'en', 'fr']


def test_select_university(manager):
    manager.select_university('Carleton University')
    assert manager.selected_university_name == 'Carleton University'


def test_select_unknown_university_keeps_selection(manager):
    manager.select_university('Brock University')
    with pytest.raises(UniversityNotFoundError):
        manager.select_university('Nonexistent University')
    assert manager.selected_university_name == 'Brock University'


def test_language_and_selection_are_independent(manager):
    manager.select_university('Brock University')
    manager.toggle_language()
    assert manager.selected_university_name == 'Brock University'
    manager.select_university('Algoma University')
    assert manager.language_code == 'fr'


def test_state_property_is_a_copy(manager):
    state = manager.state
    state.selected_university_name = 'Nonexistent University'
    assert manager.selected_university_name == 'Algoma University'


def test_dispatch_commands(manager):
    assert manager.dispatch(SelectUniversity('Carleton University')) is True
    assert manager.dispatch(ToggleLanguage()) is True
    assert manager.state == SelectionState('fr', 'Carleton University')
    assert manager.dispatch(SetLanguage('en')) is True
    assert manager.dispatch(SetLanguage('en')) is False


def test_dispatch_ignores_unknown_university(manager, caplog):
    with caplog.at_level(logging.WARNING, logger='services.state_service'):
        assert manager.dispatch(SelectUniversity('Nonexistent University')) is False
    assert manager.selected_university_name == 'Algoma University'
    assert 'Nonexistent University' in caplog.text


def test_dispatch_rejects_unknown_command(manager):
    with pytest.raises(TypeError):
        manager.dispatch('toggle')


def test_round_trip_through_store_data(manager):
    manager.dispatch(SelectUniversity('Brock University'))
    manager.dispatch(ToggleLanguage())
    restored = SelectionStateManager.from_dict(manager.to_dict())
    assert restored.state == manager.state


def test_from_dict_without_data_gives_defaults():
    assert SelectionStateManager.from_dict(None).state == SelectionState('en', 'Algoma University')


def test_from_dict_repairs_invalid_fields():
    restored = SelectionStateManager.from_dict(
        {'language_code': 'de', 'selected_university_name': 'Carleton University'}
    )
    assert restored.state == SelectionState('en', 'Carleton University')
    restored = SelectionStateManager.from_dict({'language_code': 'fr'})
    assert restored.state == SelectionState('fr', 'Algoma University')


def test_custom_dataset_defaults_to_its_first_record():
    dataset = (UniversityRecord('Only University', 10, 0, 0),)
    manager = SelectionStateManager(dataset=dataset)
    assert manager.selected_university_name == 'Only University'


def test_initial_state_argument_is_validated():
    with pytest.raises(UniversityNotFoundError):
        SelectionStateManager(state=SelectionState('en', 'Nonexistent University'))
