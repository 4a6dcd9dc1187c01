from pydantic import BaseModel, Field


class CycleSettings(BaseModel):
    """Configuration values consumed by the cycle and invitation use cases"""

    timezone: str = "America/New_York"
    window_open_weekday: int = Field(default=3, ge=0, le=6)
    window_open_hour: int = Field(default=9, ge=0, le=23)
    window_close_weekday: int = Field(default=6, ge=0, le=6)
    window_close_hour: int = Field(default=18, ge=0, le=23)
    reminder_window_hours: int = Field(default=24, ge=0)
    retention_weeks: int = Field(default=12, ge=1)

    streak_required_for_invite: int = Field(default=4, ge=1)
    max_invites_per_member: int = Field(default=5, ge=0)
    invite_expiry_days: int = Field(default=7, ge=1)

    @classmethod
    def from_config(cls, config) -> "CycleSettings":
        return cls(
            timezone=config.TIMEZONE,
            window_open_weekday=config.WINDOW_OPEN_WEEKDAY,
            window_open_hour=config.WINDOW_OPEN_HOUR,
            window_close_weekday=config.WINDOW_CLOSE_WEEKDAY,
            window_close_hour=config.WINDOW_CLOSE_HOUR,
            reminder_window_hours=config.REMINDER_WINDOW_HOURS,
            retention_weeks=config.RETENTION_WEEKS,
            streak_required_for_invite=config.STREAK_REQUIRED_FOR_INVITE,
            max_invites_per_member=config.MAX_INVITES_PER_MEMBER,
            invite_expiry_days=config.INVITE_EXPIRY_DAYS,
        )
