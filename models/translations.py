"""Display strings for every supported language."""

import logging

from config.settings import APP_CONFIG
from models.errors import MissingTranslationError

logger = logging.getLogger(__name__)

TRANSLATIONS = {
    "en": {
        "dashboard_title": "Canadian University Enrolment Dashboard",
        "dashboard_subtitle": (
            "Fall 2024 Enrolment Data | Source: Association of Atlantic Universities, "
            "Council of Ontario Universities, Individual institutions, "
            "Bureau de coopération interuniversitaire"
        ),
        "bar_chart_title": "Full-Time Undergraduate Enrolment",
        "bar_chart_subtitle": "Click a bar to see details",
        "doughnut_chart_title": "Enrolment Breakdown for",
        "ft_undergrad": "FT Undergrad",
        "ft_grad": "FT Grad",
        "pt_undergrad": "PT Undergrad",
        "university": "University",
        "enrolment": "Enrolment",
        "language_toggle": "Français",
        "download_label": "Download data (CSV)",
        "placeholder_note": "* Placeholder figures",
        "thousands_separator": ",",
    },
    "fr": {
        "dashboard_title": "Tableau de Bord des Inscriptions Universitaires Canadiennes",
        "dashboard_subtitle": (
            "Données d'inscription pour l'automne 2024 | Source : Association des universités "
            "de l'Atlantique, Conseil des universités de l'Ontario, Établissements individuels, "
            "Bureau de coopération interuniversitaire"
        ),
        "bar_chart_title": "Inscriptions de Premier Cycle à Temps Plein",
        "bar_chart_subtitle": "Cliquez sur une barre pour voir les détails",
        "doughnut_chart_title": "Répartition des Inscriptions pour",
        "ft_undergrad": "1er cycle TP",
        "ft_grad": "2e/3e cycle TP",
        "pt_undergrad": "1er cycle TPartiel",
        "university": "Université",
        "enrolment": "Inscriptions",
        "language_toggle": "English",
        "download_label": "Télécharger les données (CSV)",
        "placeholder_note": "* Données fictives",
        "thousands_separator": "\u202f",
    },
}

# Toggle order is the declaration order of TRANSLATIONS
SUPPORTED_LANGUAGES = tuple(TRANSLATIONS)


def translate(localization, key, strict=None):
    """
    Looks up one display string in a localization entry.

    Args:
        localization (dict): Localization entry for the active language.
        key (str): Translation key.
        strict (bool or None): Raise on a missing key. Defaults to
                               APP_CONFIG["strict_translations"].

    Returns:
        str: The display string, or the key itself when it is missing and
             strict mode is off.

    Raises:
        MissingTranslationError: If the key is missing and strict mode is on.
    """
    if strict is None:
        strict = APP_CONFIG["strict_translations"]
    try:
        return localization[key]
    except KeyError:
        if strict:
            raise MissingTranslationError(key) from None
        logger.warning(f"Missing translation {key!r}; showing key")
        return key


def validate_translations(translations=TRANSLATIONS):
    """
    Checks that every language defines the same keys.

    Returns:
        dict: Language code -> sorted list of keys it lacks. Empty when consistent.
    """
    all_keys = set()
    for entry in translations.values():
        all_keys.update(entry)
    missing = {}
    for code, entry in translations.items():
        absent = sorted(all_keys - set(entry))
        if absent:
            missing[code] = absent
    return missing
