import logging

from dash import Dash
import dash_bootstrap_components as dbc

from config.settings import APP_CONFIG
from controllers.callbacks import register_callbacks
from models.layout import create_app_layout
from models.translations import validate_translations

logging.basicConfig(level=APP_CONFIG["log_level"])
logger = logging.getLogger(__name__)


def create_app():
    """
    Builds the Dash application: stylesheet, layout and callbacks.

    Inconsistent translation tables are reported at startup so missing keys
    show up before a user switches language.

    Returns:
        Dash: The configured application.
    """
    missing = validate_translations()
    for code, keys in missing.items():
        logger.warning(f"Language {code!r} is missing translations: {', '.join(keys)}")

    app = Dash(
        __name__,
        title=APP_CONFIG["title"],
        external_stylesheets=[
            dbc.themes.BOOTSTRAP,
            'https://fonts.googleapis.com/css2?family=Open+Sans:wght@400;600;700&display=swap',
        ]
    )
    # Layout is a function so each page load gets a fresh default selection
    app.layout = create_app_layout
    register_callbacks(app)
    logger.info("Dashboard application initialized")
    return app


app = create_app()
server = app.server

if __name__ == '__main__':
    app.run(debug=APP_CONFIG["debug"], host=APP_CONFIG["host"], port=APP_CONFIG["port"])
