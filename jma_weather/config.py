FORECAST_BASE_URL = "https://www.jma.go.jp/bosai/forecast/data/forecast"
HTTP_TIMEOUT = 10

DEFAULT_REGION = "東京"

# 表示用ラベル
UNKNOWN = "不明"
SUNNY = "晴れ"
RAINY = "雨"
CLOUDY = "曇り"

TEMP_UNIT = "℃"
DAY_SUFFIX = "日"

FETCH_ERROR_MESSAGE = "天気データを取得できませんでした"
PARSE_ERROR_MESSAGE = "データの解析に失敗しました"

THREE_DAY_COUNT = 3
