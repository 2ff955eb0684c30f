"""
Open food details screens, one order composition engine per screen.
"""

from collections import OrderedDict
import time
from typing import Callable, Dict, Optional
from uuid import uuid4

from app.config import settings
from app.exceptions import LoadError, NotFoundError
from core.base.base_service import BaseService
from services.order_composition_service import OrderCompositionService


class ScreenRegistry(BaseService):
    """Keeps each screen's engine until the screen is closed or expires.

    Engines are never shared: opening the same dish twice gives two screens.
    Screens unused for ``idle_ttl_sec`` are dropped, and once ``max_screens``
    are open the least recently used one is closed to make room.
    """

    def __init__(
        self,
        engine_factory: Callable[[], OrderCompositionService],
        max_screens: Optional[int] = None,
        idle_ttl_sec: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__("gorestaurant.screens")
        self.engine_factory = engine_factory
        self.max_screens = max_screens or settings.max_open_screens
        self.idle_ttl_sec = idle_ttl_sec or settings.screen_idle_ttl_sec
        self.clock = clock
        # Least recently used first
        self._screens: "OrderedDict[str, OrderCompositionService]" = OrderedDict()
        self._last_used: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._screens)

    async def open(self, dish_id: int) -> str:
        """Create a screen and load its dish.

        A failed load keeps the screen in the failed state so it can be
        retried with ``reload``; the LoadError is logged, not raised.
        """
        self.expire_idle()
        while len(self._screens) >= self.max_screens:
            oldest = next(iter(self._screens))
            self._discard(oldest, reason="capacity")

        screen_id = uuid4().hex
        engine = self.engine_factory()
        self._screens[screen_id] = engine
        self._last_used[screen_id] = self.clock()
        try:
            await engine.load(dish_id)
        except LoadError as exc:
            self.log_warning("Screen opened in failed state", screen_id=screen_id, error=exc)
        else:
            self.log_info("Screen opened", screen_id=screen_id, dish_id=dish_id)
        return screen_id

    def get(self, screen_id: str) -> OrderCompositionService:
        """Engine of an open screen; counts as a use of the screen."""
        self.expire_idle()
        try:
            engine = self._screens[screen_id]
        except KeyError:
            raise NotFoundError(
                f"Screen {screen_id} not found", details={"screen_id": screen_id}
            ) from None
        self._screens.move_to_end(screen_id)
        self._last_used[screen_id] = self.clock()
        return engine

    def close(self, screen_id: str) -> None:
        """Tear the screen down and discard its composition."""
        self.get(screen_id)
        self._discard(screen_id, reason="closed")

    def expire_idle(self) -> int:
        """Close every screen unused for longer than the idle TTL."""
        deadline = self.clock() - self.idle_ttl_sec
        expired = [sid for sid, used in self._last_used.items() if used <= deadline]
        for screen_id in expired:
            self._discard(screen_id, reason="idle")
        return len(expired)

    def _discard(self, screen_id: str, reason: str) -> None:
        del self._screens[screen_id]
        del self._last_used[screen_id]
        self.log_info("Screen closed", screen_id=screen_id, reason=reason)
