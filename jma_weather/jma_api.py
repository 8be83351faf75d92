import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from .config import FORECAST_BASE_URL, HTTP_TIMEOUT

logger = logging.getLogger(__name__)


class FetchFailure(str, Enum):
    NETWORK = "network"
    HTTP = "http"
    PARSE = "parse"


@dataclass(frozen=True)
class FetchResult:
    payload: Any = None
    failure: Optional[FetchFailure] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None


def build_endpoint(area_code: str) -> str:
    if not area_code:
        raise ValueError("area_code must not be empty")
    return f"{FORECAST_BASE_URL}/{area_code}.json"


def _get_forecast(url: str, timeout: float) -> FetchResult:
    try:
        res = requests.get(url, timeout=timeout)
    except requests.RequestException as ex:
        return FetchResult(failure=FetchFailure.NETWORK, detail=str(ex))

    try:
        res.raise_for_status()
    except requests.HTTPError as ex:
        return FetchResult(failure=FetchFailure.HTTP, detail=str(ex))

    try:
        return FetchResult(payload=res.json())
    except Exception as ex:
        # 深すぎるネストでは ValueError ではなく RecursionError になる
        return FetchResult(failure=FetchFailure.PARSE, detail=f"{type(ex).__name__}: {ex}")


async def fetch_forecast(area_code: str, timeout: float = HTTP_TIMEOUT) -> FetchResult:
    """エリアコードの予報JSONを1回だけ取得する。

    失敗しても例外は投げず、FetchResult.failure に種類を入れて返す。
    requests はブロッキングなのでワーカースレッドで実行する。
    """
    url = build_endpoint(area_code)
    result = await asyncio.to_thread(_get_forecast, url, timeout)
    if not result.ok:
        logger.warning("forecast fetch failed (%s) for %s: %s", result.failure.value, url, result.detail)
    return result
