"""Derived status for promo codes and promotional trials.

Nothing here is stored; status is recomputed from the code row, its
redemption count and the current time.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Mapping, Optional, Union

from seat_economics.models.enums import PromoCodeStatus
from seat_economics.models.errors import InvalidInputError, require_non_negative

_SECONDS_PER_DAY = 60 * 60 * 24


@dataclass(frozen=True)
class PromoCode:
    code: str
    is_active: bool = True
    expires_at: Optional[datetime] = None
    max_redemptions: Optional[int] = None
    # Set for trial codes, None for discount codes
    tier_duration_days: Optional[int] = None
    description: str = ""

    @property
    def is_trial(self) -> bool:
        return self.tier_duration_days is not None


@dataclass(frozen=True)
class PromoCodeSummary:
    code: PromoCode
    redemption_count: int
    computed_status: PromoCodeStatus


@dataclass(frozen=True)
class PromoCodeStats:
    total: int
    active: int
    expired: int
    depleted: int
    inactive: int
    trial_codes: int
    discount_codes: int


def _utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _utc(now) if now is not None else datetime.now(tz=timezone.utc)


def compute_promo_code_status(
    code: PromoCode,
    redemption_count: int,
    now: Optional[datetime] = None,
) -> PromoCodeStatus:
    """inactive > expired > depleted > active"""
    require_non_negative("redemption_count", redemption_count)
    current = _now(now)

    if not code.is_active:
        return PromoCodeStatus.INACTIVE
    if code.expires_at is not None and _utc(code.expires_at) < current:
        return PromoCodeStatus.EXPIRED
    # A max of 0 means unlimited
    if code.max_redemptions and redemption_count >= code.max_redemptions:
        return PromoCodeStatus.DEPLETED
    return PromoCodeStatus.ACTIVE


def summarize_promo_codes(
    codes: Iterable[PromoCode],
    redemption_counts: Mapping[str, int],
    now: Optional[datetime] = None,
    status: Optional[Union[PromoCodeStatus, str]] = None,
) -> tuple[list[PromoCodeSummary], PromoCodeStats]:
    """Enrich codes with counts and status; stats always cover every code."""
    status_filter: Optional[PromoCodeStatus] = None
    if status is not None:
        try:
            status_filter = PromoCodeStatus(status)
        except ValueError:
            raise InvalidInputError(
                f"status must be one of {[s.value for s in PromoCodeStatus]}, got {status!r}",
                field="status",
            ) from None

    current = _now(now)
    summaries: list[PromoCodeSummary] = []
    for code in codes:
        count = redemption_counts.get(code.code, 0)
        summaries.append(
            PromoCodeSummary(
                code=code,
                redemption_count=count,
                computed_status=compute_promo_code_status(code, count, current),
            )
        )

    by_status = Counter(s.computed_status for s in summaries)
    trial_codes = sum(1 for s in summaries if s.code.is_trial)
    stats = PromoCodeStats(
        total=len(summaries),
        active=by_status[PromoCodeStatus.ACTIVE],
        expired=by_status[PromoCodeStatus.EXPIRED],
        depleted=by_status[PromoCodeStatus.DEPLETED],
        inactive=by_status[PromoCodeStatus.INACTIVE],
        trial_codes=trial_codes,
        discount_codes=len(summaries) - trial_codes,
    )

    if status_filter is not None:
        summaries = [s for s in summaries if s.computed_status is status_filter]
    return summaries, stats


def count_redemptions(redeemed_codes: Iterable[str]) -> dict[str, int]:
    """Tally one redemption row per code occurrence."""
    return dict(Counter(redeemed_codes))


def trial_days_remaining(expires_at: datetime, now: Optional[datetime] = None) -> int:
    """Whole days left, rounded up; zero or negative once the trial has ended."""
    remaining = (_utc(expires_at) - _now(now)).total_seconds()
    return math.ceil(remaining / _SECONDS_PER_DAY)


def is_trial_active(expires_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    if expires_at is None:
        return False
    return _utc(expires_at) > _now(now)
