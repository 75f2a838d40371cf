from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from creatorhub_web.application.ports.bookmark_port import BookmarkPort
from creatorhub_web.application.ports.notification_port import (
    BOOKMARK_ERROR,
    BOOKMARK_PENDING,
    BOOKMARK_SUCCESS,
    ToastPort,
)
from creatorhub_web.domain.model import (
    MUTATION_FALLBACK_ERROR,
    Failed,
    Idle,
    MutationFailed,
    MutationOutcome,
    MutationState,
    MutationSucceeded,
    Pending,
    Succeeded,
)

logger = logging.getLogger(__name__)


def pending_message(was_marked: bool) -> str:
    return "Cancelling reservation..." if was_marked else "Reserving train seat..."


def success_message(was_marked: bool) -> str:
    return "Reservation cancelled." if was_marked else "Train seat reserved."


class BookmarkView:
    """Single writer of the bookmark state of one footage page view.

    Holds ``marked``, the latest anti-forgery token and the MutationState. Each
    ``toggle`` takes a generation number. A success is adopted unless a newer
    success already was, since the server rotated its token either way; a failure
    only sets ``state`` when it belongs to the latest call. Every pending toast is
    resolved by a success or error toast. Nothing is updated optimistically, a
    failure leaves ``marked`` and ``token`` as they were. Exceptions from the
    client are reported as MutationFailed.
    """

    def __init__(
        self,
        footage_id: str,
        *,
        marked: bool,
        token: str,
        client: BookmarkPort,
        notifier: ToastPort,
    ) -> None:
        self.footage_id = footage_id
        self.marked = marked
        self.token = token
        self.state: MutationState = Idle()
        self._client = client
        self._notifier = notifier
        self._generation = 0
        self._adopted_generation = 0

    @classmethod
    def from_props(cls, props: Mapping[str, Any], client: BookmarkPort, notifier: ToastPort) -> "BookmarkView":
        footage = props["footage"]
        return cls(
            str(footage["id"]),
            marked=bool(footage.get("marked", False)),
            token=str(props["token"]),
            client=client,
            notifier=notifier,
        )

    @property
    def generation(self) -> int:
        return self._generation

    def _adopt(self, generation: int, outcome: MutationSucceeded) -> bool:
        # a success rotated the server-side token even when its call was superseded
        if generation <= self._adopted_generation:
            return False
        self._adopted_generation = generation
        self.marked = outcome.marked
        self.token = outcome.next_token
        return True

    async def toggle(self) -> MutationOutcome:
        self._generation += 1
        generation = self._generation
        was_marked = self.marked
        self.state = Pending(generation=generation, was_marked=was_marked)
        self._notifier.notify(BOOKMARK_PENDING, {"message": pending_message(was_marked)})

        try:
            outcome = await self._client.toggle(self.footage_id, self.token)
        except Exception:
            logger.exception("[BOOKMARK] %s: call %d raised", self.footage_id, generation)
            outcome = MutationFailed(MUTATION_FALLBACK_ERROR)

        latest = generation == self._generation
        if isinstance(outcome, MutationSucceeded):
            adopted = self._adopt(generation, outcome)
            if adopted and (latest or not isinstance(self.state, Pending)):
                self.state = Succeeded(marked=self.marked, token=self.token)
            self._notifier.notify(BOOKMARK_SUCCESS, {"message": success_message(was_marked)})
        else:
            if latest:
                self.state = Failed(message=outcome.message)
            self._notifier.notify(BOOKMARK_ERROR, {"message": outcome.message})
        if not latest:
            logger.info("[BOOKMARK] %s: call %d resolved after call %d started",
                        self.footage_id, generation, self._generation)
        return outcome
