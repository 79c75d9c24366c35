from .structured_log import set_launch_id, get_launch_id, log_event
from .metrics import metrics_inc, metrics_observe_ms, metrics_snapshot, metrics_reset
from .errors import humanize, not_found_message, start_failed_message
