"""Utils package initialization."""

from utils.helper_utils import CallbackContextManager, monitor_performance, extract_clicked_value

__all__ = ['CallbackContextManager', 'monitor_performance', 'extract_clicked_value']
