from dataclasses import dataclass
from typing import List, Optional

from .config import DEFAULT_REGION

VIEW_TODAY = "today"
VIEW_THREE_DAY = "three-day"
VIEW_MODES = (VIEW_TODAY, VIEW_THREE_DAY)


@dataclass(frozen=True)
class TodaySummary:
    date: str
    weather: str
    temperature: str
    precipitation: str


@dataclass(frozen=True)
class DaySummary:
    date: str
    weather: str
    max_temp: str
    min_temp: str


@dataclass(frozen=True)
class ForecastMeta:
    publishing_office: str
    report_datetime: str
    area_name: str


@dataclass
class ViewState:
    """画面の状態。WeatherController だけが書き換える。"""

    selected_region: str = DEFAULT_REGION
    today: Optional[TodaySummary] = None
    three_day: Optional[List[DaySummary]] = None
    meta: Optional[ForecastMeta] = None
    error: Optional[str] = None
    is_loading: bool = False
    view_mode: str = VIEW_TODAY
