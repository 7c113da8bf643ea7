from inspect import getfile, getsourcelines
from os.path import basename
import re
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    MAX_LOG_CONTENT_LENGTH,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


_SENSITIVE_REPR_RE = re.compile(
    r"(\b(?:" + '|'.join(sorted(SENSITIVE_KEYWORDS)) + r")\b)(=|': )'[^']*'"
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def fetch_layer_depth() -> str:
    return DEPTH_LINE * (call_depth_var.get() - 1)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def mask_sensitive(data: Any) -> Any:
    """Mask ``keyword='value'`` pairs inside the repr of objects such as attrs records."""
    data_str = str(data)
    masked = _SENSITIVE_REPR_RE.sub(r"\1\2'********'", data_str)
    return data if masked == data_str else masked


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return '********' if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, max_length: int = MAX_LOG_CONTENT_LENGTH) -> Any:
    text = str(data)
    if len(text) > max_length:
        return f'{text[:max_length]}...(truncated {len(text) - max_length} chars)'
    return data
