from typing import Dict, List

# 地域のエリアコード（北海道・東京・大阪・福岡）
REGIONS: Dict[str, str] = {
    "北海道": "016000",
    "東京": "130000",
    "大阪": "270000",
    "福岡": "400000",
}


def region_names() -> List[str]:
    return list(REGIONS)


def lookup(name: str) -> str:
    """地域名からJMAのエリアコードを返す。未登録の地域は KeyError。"""
    return REGIONS[name]
