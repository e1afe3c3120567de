# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: retry logic, failure logging and rounding.
"""

import math
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

DEFAULT_LOG_PATH = Path("logs/weather_odds.log")
MAX_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 5


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up, e.g. 2.5 -> 3 and 0.125 -> 0.13.

    Python's round() uses banker's rounding (2.5 -> 2), which would make
    typical-day figures disagree with what users expect.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def with_retry(
    fn: Callable[..., Any],
    *args: Any,
    label: str = "API call",
    log_path: Path = DEFAULT_LOG_PATH,
    **kwargs: Any,
) -> Any:
    """Call a function up to MAX_ATTEMPTS times, retrying on any exception.

    Args:
        fn: Callable to invoke (usually a closure around requests.get).
        *args: Positional arguments forwarded to fn.
        label: Human-readable name for the call, used in warning messages.
        log_path: Path to the log file for recording final failures.
        **kwargs: Keyword arguments forwarded to fn.

    Returns:
        The return value of fn on success.

    Raises:
        RuntimeError: If all MAX_ATTEMPTS attempts raise exceptions.
    """
    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if attempt < MAX_ATTEMPTS:
                print(
                    f"[archive] {label} failed (attempt {attempt}/{MAX_ATTEMPTS}): "
                    f"{e}. Retrying in {RETRY_DELAY_SECONDS}s..."
                )
                time.sleep(RETRY_DELAY_SECONDS)
            else:
                msg = f"All {MAX_ATTEMPTS} attempts failed for {label}. Check your internet connection."
                print(f"[archive] {msg}")
                _log_error(str(e), log_path=log_path)
                raise RuntimeError(msg) from e


def _log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] API call failed after {MAX_ATTEMPTS} attempts: {message}\n")
    except OSError:
        pass  # Never crash on logging failure
