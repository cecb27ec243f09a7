"""Utility functions and classes for the enrolment dashboard."""

import time
import logging
import threading
from functools import wraps

# Configure logging
logger = logging.getLogger(__name__)

PERFORMANCE_WINDOW = 10


class CallbackContextManager:
    """
    Reads which component fired a Dash callback.

    Wraps ``dash.callback_context`` so callbacks can ask for the triggering
    component ID without parsing ``prop_id`` strings.
    """
    def __init__(self, context):
        """
        Args:
            context (dash.callback_context): The current callback context provided by Dash.
        """
        triggered = context.triggered or []
        # Initial calls report a placeholder trigger whose prop_id is '.'
        self._triggered = triggered[0] if triggered and triggered[0].get('prop_id') != '.' else None
        self._triggered_id = self._triggered['prop_id'].split('.')[0] if self._triggered else None

    @property
    def triggered_id(self):
        return self._triggered_id

    @property
    def is_triggered(self):
        return self._triggered is not None


def monitor_performance(func):
    """
    Decorator that logs the average run time of ``func`` every
    PERFORMANCE_WINDOW calls.
    """
    timings = []
    lock = threading.Lock()

    def _record(elapsed):
        with lock:
            timings.append(elapsed)
            if len(timings) < PERFORMANCE_WINDOW:
                return
            avg_time = sum(timings) / len(timings)
            timings.clear()
        logger.info(f"{func.__name__} average execution time: {avg_time:.4f}s")

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _record(time.perf_counter() - start_time)
    return wrapper


def extract_clicked_value(click_data):
    """
    Reads the category of the clicked bar from a Dash graph clickData payload.

    Args:
        click_data (dict or None): Data from a chart click event.

    Returns:
        str or None: The clicked category, or None if the payload has no points.
    """
    if not click_data or not click_data.get('points'):
        return None
    return click_data['points'][0].get('x')
