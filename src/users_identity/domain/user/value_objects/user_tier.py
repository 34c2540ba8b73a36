from enum import Enum


class UserTier(str, Enum):
    """Membership tiers. Upgrades only go from standard to premium."""

    STANDARD = "standard"
    PREMIUM = "premium"
