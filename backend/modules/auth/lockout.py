"""
Failed-login counting and time-boxed lockout.

An account is Locked while lockout_until lies in the future and
Unlocked otherwise. There is no stored flag: an expired lockout simply
stops applying, and the counters are only rewritten by the next
failure or success.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .models import Account

DEFAULT_MAX_FAILED_ATTEMPTS = 5
DEFAULT_LOCKOUT_DURATION = timedelta(minutes=30)


class AccountSecurityPolicy:
    """
    Pure state transitions over an Account.

    Methods return updated copies; persisting them is the caller's job.
    """

    def __init__(
        self,
        max_failed_attempts: int = DEFAULT_MAX_FAILED_ATTEMPTS,
        lockout_duration: timedelta = DEFAULT_LOCKOUT_DURATION,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.max_failed_attempts = max_failed_attempts
        self.lockout_duration = lockout_duration
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def now(self) -> datetime:
        return self._clock()

    def is_locked(self, account: Account, now: Optional[datetime] = None) -> bool:
        """True while the account's lockout window is still open."""
        now = now or self.now()
        return account.lockout_until is not None and account.lockout_until > now

    def register_failure(self, account: Account) -> Account:
        """
        Count a wrong password.

        Reaching the threshold opens a lockout window starting now.
        """
        now = self.now()
        attempts = account.failed_login_attempts + 1
        update = {"failed_login_attempts": attempts, "updated_at": now}
        if attempts >= self.max_failed_attempts:
            update["lockout_until"] = now + self.lockout_duration
        return account.model_copy(update=update)

    def register_success(self, account: Account) -> Account:
        """Reset the counter and clear any lockout."""
        return account.model_copy(
            update={
                "failed_login_attempts": 0,
                "lockout_until": None,
                "updated_at": self.now(),
            }
        )
