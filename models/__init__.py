"""Models package initialization."""

from models.dataset import UNIVERSITY_DATA, ENROLMENT_CATEGORIES, UniversityRecord, find_university
from models.translations import TRANSLATIONS, SUPPORTED_LANGUAGES, translate

__all__ = [
    'UNIVERSITY_DATA',
    'ENROLMENT_CATEGORIES',
    'UniversityRecord',
    'find_university',
    'TRANSLATIONS',
    'SUPPORTED_LANGUAGES',
    'translate'
]
