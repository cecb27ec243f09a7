"""Components package initialization."""

from components.charts import create_chart_card
from components.navbar import create_navbar

__all__ = [
    'create_chart_card',
    'create_navbar'
]
