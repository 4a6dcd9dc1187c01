"""
Notification Sender

Outbound messages are delegated to an injected sender. Delivery happens after
the triggering state change is committed and never undoes it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Awaitable, List

from weekly_recs.domain.entities import Cycle, Member, Submission

logger = logging.getLogger(__name__)


class NotificationSender(ABC):
    """Outbound message interface - application layer"""

    @abstractmethod
    async def send_window_open_notice(self, members: List[Member], cycle: Cycle) -> None:
        pass

    @abstractmethod
    async def send_compilation_notice(
        self, members: List[Member], submissions: List[Submission], cycle: Cycle
    ) -> None:
        pass

    @abstractmethod
    async def send_submission_ack(self, member: Member, submission: Submission) -> None:
        pass

    @abstractmethod
    async def send_invitation(
        self, inviter_display_name: str, invitee_email: str, token: str
    ) -> None:
        pass

    @abstractmethod
    async def send_eligibility_granted(self, member: Member, streak_count: int) -> None:
        pass

    @abstractmethod
    async def send_reminder(
        self, members: List[Member], cycle: Cycle, hours_left: int
    ) -> None:
        pass


async def deliver(action: str, send: Awaitable[None]) -> bool:
    """
    Await a notification, logging and swallowing any failure.

    Returns:
        True if the sender completed, False if it raised
    """
    try:
        await send
    except Exception:
        logger.exception(f"Notification '{action}' failed; state change is kept")
        return False
    return True
