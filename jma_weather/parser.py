import logging
from datetime import date
from typing import Any, List, Optional

from .config import (
    CLOUDY,
    DAY_SUFFIX,
    RAINY,
    SUNNY,
    TEMP_UNIT,
    THREE_DAY_COUNT,
    UNKNOWN,
)
from .models import DaySummary, ForecastMeta, TodaySummary

logger = logging.getLogger(__name__)

# 判定順がそのまま優先度になる
WEATHER_GLYPHS = (
    ("晴", SUNNY),
    ("雨", RAINY),
    ("曇", CLOUDY),
)


def dig(node: Any, *path: Any) -> Any:
    """ネストしたJSONをたどる。

    キーが無い・インデックスが範囲外・途中が None のときは None を返す。
    途中の値の型が想定と違う（dict のはずが list など）ときは TypeError。
    """
    cur = node
    for key in path:
        if cur is None:
            return None
        if isinstance(key, int):
            if not isinstance(cur, list):
                raise TypeError(f"expected list at [{key}], got {type(cur).__name__}")
            if key >= len(cur):
                return None
            cur = cur[key]
        else:
            if not isinstance(cur, dict):
                raise TypeError(f"expected object at '{key}', got {type(cur).__name__}")
            cur = cur.get(key)
    return cur


def _is_missing(x: Any) -> bool:
    return x is None or x == ""


def _as_list(x: Any) -> list:
    if x is None:
        return []
    if not isinstance(x, list):
        raise TypeError(f"expected list, got {type(x).__name__}")
    return x


def classify_weather(text: Any) -> str:
    if not text or not isinstance(text, str):
        return UNKNOWN
    for glyph, label in WEATHER_GLYPHS:
        if glyph in text:
            return label
    return text


def format_day_label(value: Any) -> str:
    """ISO形式の日時から「3日」のような日ラベルを作る。

    日付部分（先頭10文字）をそのまま暦日として読むので、タイムゾーン変換はしない。
    JMA の時刻は +09:00 付きなので、表示は日本時間の日付になる。
    """
    if not value or not isinstance(value, str):
        return UNKNOWN
    try:
        d = date.fromisoformat(value.split("T")[0][:10])
    except ValueError:
        return UNKNOWN
    return f"{d.day}{DAY_SUFFIX}"


def format_temp(x: Any) -> str:
    if _is_missing(x):
        return UNKNOWN
    return f"{x}{TEMP_UNIT}"


def format_percent(x: Any) -> str:
    if _is_missing(x):
        return UNKNOWN
    return f"{x}%"


def extract_today(data: Any) -> Optional[TodaySummary]:
    if not data:
        return None

    try:
        report_datetime = dig(data, 0, "reportDatetime")
        weather_text = dig(data, 0, "timeSeries", 0, "areas", 0, "weathers", 0)
        # 気温は2件目（週間予報）の3番目の系列、2番目の値
        temperature = dig(data, 1, "timeSeries", 2, "areas", 0, "temps", 1)
        pop = dig(data, 0, "timeSeries", 1, "areas", 0, "pops", 0)

        return TodaySummary(
            date=format_day_label(report_datetime),
            weather=classify_weather(weather_text or UNKNOWN),
            temperature=format_temp(temperature),
            precipitation=format_percent(pop),
        )
    except TypeError as ex:
        logger.exception("failed to extract today's weather: %s", ex)
        return None


def extract_three_day(data: Any) -> Optional[List[DaySummary]]:
    if not data:
        return None

    try:
        first = dig(data, 0)
        if not isinstance(first, dict) or not first.get("timeSeries"):
            return None

        days = _as_list(dig(first, "timeSeries", 0, "timeDefines"))
        weathers = _as_list(dig(first, "timeSeries", 0, "areas", 0, "weathers"))
        max_temps = _as_list(dig(first, "timeSeries", 1, "areas", 0, "temps"))
        min_temps = _as_list(dig(first, "timeSeries", 2, "areas", 0, "temps"))

        rows: List[DaySummary] = []
        for i, day in enumerate(days[:THREE_DAY_COUNT]):
            weather = weathers[i] if i < len(weathers) else None
            rows.append(
                DaySummary(
                    date=format_day_label(day),
                    weather=UNKNOWN if _is_missing(weather) else classify_weather(weather),
                    max_temp=format_temp(max_temps[i] if i < len(max_temps) else None),
                    min_temp=format_temp(min_temps[i] if i < len(min_temps) else None),
                )
            )
        return rows
    except TypeError as ex:
        logger.exception("failed to extract 3-day weather: %s", ex)
        return None


def extract_meta(data: Any) -> Optional[ForecastMeta]:
    if not data:
        return None

    try:
        office = dig(data, 0, "publishingOffice")
        published_at = dig(data, 0, "reportDatetime")
        area_name = dig(data, 0, "timeSeries", 0, "areas", 0, "area", "name")
    except TypeError as ex:
        logger.warning("failed to extract forecast meta: %s", ex)
        return None

    return ForecastMeta(
        publishing_office=UNKNOWN if _is_missing(office) else str(office),
        report_datetime=UNKNOWN if _is_missing(published_at) else str(published_at),
        area_name=UNKNOWN if _is_missing(area_name) else str(area_name),
    )
