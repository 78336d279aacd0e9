"""
Bounded polling for UI state that settles after an asynchronous render.

Every wait in the browser suite goes through :func:`poll`, which keeps asking
a probe until it answers yes or the policy's time budget runs out. The
outcome is one of three states so callers can tell "not there (yet)" apart
from "the browser broke":

- ``FOUND``: the probe answered true within the budget
- ``NOT_FOUND``: the budget ran out; this is a normal negative answer
- ``ERROR``: the probe raised something other than a Playwright timeout
"""

import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from django.conf import settings
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)


def polling_setting(name: str) -> int:
    """Read one value (milliseconds) from ``settings.E2E_POLLING``."""
    return int(settings.E2E_POLLING[name])


@dataclass(frozen=True)
class PollingPolicy:
    """How often to probe and for how long, both in milliseconds."""

    interval_ms: int
    timeout_ms: int

    def __post_init__(self):
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        if self.timeout_ms < 0:
            raise ValueError("timeout_ms must not be negative")

    @classmethod
    def from_settings(cls, timeout_name: str) -> "PollingPolicy":
        """Build a policy from the configured interval and a named timeout.

        Example:
            >>> PollingPolicy.from_settings("entity_timeout_ms")
            PollingPolicy(interval_ms=25, timeout_ms=500)
        """
        return cls(
            interval_ms=polling_setting("interval_ms"),
            timeout_ms=polling_setting(timeout_name),
        )


class WaitStatus(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class WaitResult:
    status: WaitStatus
    error: Optional[BaseException] = None
    attempts: int = 0

    @property
    def found(self) -> bool:
        return self.status is WaitStatus.FOUND

    @property
    def failed(self) -> bool:
        return self.status is WaitStatus.ERROR


def _sleep_seconds(ms: float) -> None:
    time.sleep(ms / 1000.0)


def poll(
    probe: Callable[[], bool],
    policy: PollingPolicy,
    sleep: Callable[[float], None] = _sleep_seconds,
    clock: Callable[[], float] = time.monotonic,
) -> WaitResult:
    """
    Call ``probe`` until it returns true or ``policy.timeout_ms`` elapses.

    The probe always runs at least once, so a zero timeout is a single
    check. A Playwright ``TimeoutError`` raised by the probe counts as a
    false answer; any other Playwright error ends polling with ``ERROR``.
    Errors that are not Playwright's propagate unchanged.

    Args:
        probe: Zero-argument callable answering "is it there?"
        policy: Interval and timeout in milliseconds
        sleep: Called with a delay in milliseconds between attempts; pass
            ``page.wait_for_timeout`` to let the page keep processing events
        clock: Monotonic clock in seconds, injectable for tests

    Returns:
        WaitResult: status plus the number of probe calls made
    """
    deadline = clock() + policy.timeout_ms / 1000.0
    attempts = 0
    while True:
        attempts += 1
        try:
            if probe():
                return WaitResult(WaitStatus.FOUND, attempts=attempts)
        except PlaywrightTimeoutError:
            pass
        except PlaywrightError as e:
            logger.debug("Probe failed after %d attempt(s): %s", attempts, e)
            return WaitResult(WaitStatus.ERROR, error=e, attempts=attempts)

        remaining_ms = (deadline - clock()) * 1000.0
        if remaining_ms <= 0:
            return WaitResult(WaitStatus.NOT_FOUND, attempts=attempts)
        sleep(min(policy.interval_ms, remaining_ms))
