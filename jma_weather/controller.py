import logging
from typing import Awaitable, Callable, Optional

from .config import DEFAULT_REGION, FETCH_ERROR_MESSAGE, HTTP_TIMEOUT, PARSE_ERROR_MESSAGE
from .jma_api import FetchResult, fetch_forecast
from .models import VIEW_MODES, ViewState
from .parser import extract_meta, extract_three_day, extract_today
from .regions import lookup

logger = logging.getLogger(__name__)

Fetcher = Callable[..., Awaitable[FetchResult]]


class WeatherController:
    """ViewState を持ち、地域選択ごとに予報を取り直す。

    状態は select_region / select_view_mode と取得完了時にだけ変わる。
    変化のたびに on_change(state) を呼ぶので、UI はそこで再描画する。
    """

    def __init__(
        self,
        fetcher: Fetcher = fetch_forecast,
        on_change: Optional[Callable[[ViewState], None]] = None,
        timeout: float = HTTP_TIMEOUT,
        default_region: str = DEFAULT_REGION,
    ):
        lookup(default_region)
        self.state = ViewState(selected_region=default_region)
        self._fetcher = fetcher
        self._on_change = on_change
        self._timeout = timeout
        self._generation = 0

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    async def select_region(self, name: str) -> None:
        area_code = lookup(name)

        self._generation += 1
        generation = self._generation

        s = self.state
        s.selected_region = name
        s.is_loading = True
        s.error = None
        s.today = None
        s.three_day = None
        s.meta = None
        self._notify()

        result = None
        try:
            result = await self._fetcher(area_code, timeout=self._timeout)
        except Exception:
            logger.exception("forecast fetch raised for %s (%s)", name, area_code)
        finally:
            if generation == self._generation:
                self._finish(result)
            else:
                logger.info("discarding stale forecast for %s (%s)", name, area_code)

    def _finish(self, result: Optional[FetchResult]) -> None:
        s = self.state
        try:
            self._apply(result)
        except Exception:
            logger.exception("failed to apply forecast for %s", s.selected_region)
            s.today = None
            s.three_day = None
            s.meta = None
            s.error = PARSE_ERROR_MESSAGE
        finally:
            s.is_loading = False
            self._notify()

    def _apply(self, result: Optional[FetchResult]) -> None:
        s = self.state
        if result is None or not result.ok:
            s.error = FETCH_ERROR_MESSAGE
            return

        today = extract_today(result.payload)
        three_day = extract_three_day(result.payload)

        if today is not None:
            s.today = today
        if three_day is not None:
            s.three_day = three_day

        if today is None and three_day is None:
            s.error = PARSE_ERROR_MESSAGE
            return

        s.meta = extract_meta(result.payload)

    def select_view_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            raise ValueError(f"unknown view mode: {mode}")
        self.state.view_mode = mode
        self._notify()
