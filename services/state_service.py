"""Selection state for the dashboard: active language and selected university."""

import logging
from dataclasses import dataclass

from models.dataset import UNIVERSITY_DATA, find_university
from models.errors import InvalidLanguageError, UniversityNotFoundError
from models.translations import TRANSLATIONS

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Current language code and selected university name."""
    language_code: str
    selected_university_name: str

    def to_dict(self):
        return {
            "language_code": self.language_code,
            "selected_university_name": self.selected_university_name,
        }


# Commands produced by user interaction and consumed by SelectionStateManager.dispatch
@dataclass(frozen=True)
class SelectUniversity:
    name: str


@dataclass(frozen=True)
class SetLanguage:
    code: str


@dataclass(frozen=True)
class ToggleLanguage:
    pass


class SelectionStateManager:
    """
    Holds and mutates the session's selection state.

    Both fields are validated before they are committed, so the state always
    names a supported language and an existing university. A fresh manager
    starts on the first supported language and the first record of the
    dataset.

    Attributes:
        _dataset (tuple): Ordered UniversityRecord instances.
        _translations (dict): Language code -> localization entry.
        _languages (tuple): Supported language codes in toggle order.
        _state (SelectionState): The current state.

    Methods:
        set_language(code): Switch to a supported language.
        toggle_language(): Cycle to the next supported language.
        select_university(name): Select an existing university.
        dispatch(command): Apply a SelectUniversity, SetLanguage or ToggleLanguage command.
        from_dict(data): Rebuild a manager from serialized store data.
    """
    def __init__(self, dataset=UNIVERSITY_DATA, translations=TRANSLATIONS, state=None):
        if not dataset:
            raise ValueError("Dataset must contain at least one university")
        if not translations:
            raise ValueError("At least one language must be supported")
        self._dataset = dataset
        self._translations = translations
        self._languages = tuple(translations)
        self._state = SelectionState(self._languages[0], dataset[0].name)
        if state is not None:
            self.set_language(state.language_code)
            self.select_university(state.selected_university_name)

    @property
    def state(self):
        # Copy so callers cannot bypass validation
        return SelectionState(self._state.language_code, self._state.selected_university_name)

    @property
    def language_code(self):
        return self._state.language_code

    @property
    def selected_university_name(self):
        return self._state.selected_university_name

    @property
    def supported_languages(self):
        return self._languages

    @property
    def dataset(self):
        return self._dataset

    @property
    def selected_record(self):
        return find_university(self._state.selected_university_name, self._dataset)

    @property
    def localization(self):
        return self._translations[self._state.language_code]

    def set_language(self, code):
        """
        Replaces the active language.

        Args:
            code (str): A supported language code.

        Raises:
            InvalidLanguageError: If the code is not supported. The state is left unchanged.
        """
        if code not in self._languages:
            raise InvalidLanguageError(code, self._languages)
        self._state.language_code = code

    def toggle_language(self):
        """Cycle to the next supported language, wrapping around after the last one."""
        index = self._languages.index(self._state.language_code)
        self.set_language(self._languages[(index + 1) % len(self._languages)])

    def select_university(self, name):
        """
        Replaces the selected university.

        Args:
            name (str): Name of a record in the dataset.

        Raises:
            UniversityNotFoundError: If no record has that name. The previous
                                     selection is kept.
        """
        if find_university(name, self._dataset) is None:
            raise UniversityNotFoundError(name)
        self._state.selected_university_name = name

    def dispatch(self, command):
        """
        Applies one user command to the state.

        An unknown university is ignored and logged so the last valid
        selection stays in place.

        Args:
            command: SelectUniversity, SetLanguage or ToggleLanguage.

        Returns:
            bool: True if the state changed.

        Raises:
            InvalidLanguageError: For a SetLanguage command with an unsupported code.
            TypeError: For any other command type.
        """
        before = self.state
        if isinstance(command, SelectUniversity):
            try:
                self.select_university(command.name)
            except UniversityNotFoundError as e:
                logger.warning(f"Ignoring selection: {e}")
                return False
        elif isinstance(command, SetLanguage):
            self.set_language(command.code)
        elif isinstance(command, ToggleLanguage):
            self.toggle_language()
        else:
            raise TypeError(f"Unsupported command {command!r}")

        changed = self._state != before
        if changed:
            logger.info(f"Selection state changed: {before.to_dict()} -> {self._state.to_dict()}")
        return changed

    def to_dict(self):
        return self._state.to_dict()

    @classmethod
    def from_dict(cls, data, dataset=UNIVERSITY_DATA, translations=TRANSLATIONS):
        """
        Rebuilds a manager from store data.

        Missing or invalid fields fall back to the defaults instead of failing,
        so a stale store cannot break the page.

        Args:
            data (dict or None): Output of to_dict(), or None for a fresh session.

        Returns:
            SelectionStateManager: The restored manager.
        """
        manager = cls(dataset, translations)
        if not data:
            return manager
        language = data.get("language_code")
        name = data.get("selected_university_name")
        try:
            manager.set_language(language)
        except InvalidLanguageError as e:
            logger.warning(f"Resetting language in stored state: {e}")
        try:
            manager.select_university(name)
        except UniversityNotFoundError as e:
            logger.warning(f"Resetting selection in stored state: {e}")
        return manager
