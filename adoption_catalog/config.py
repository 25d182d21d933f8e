"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("ADOPTION_CATALOG_DATA_DIR", str(ROOT_DIR / "data")))
ASSETS_DIR = ROOT_DIR / "assets"

FAVORITES_FILE = DATA_DIR / "favorites.csv"
CATALOG_CACHE_FILE = DATA_DIR / "animals_cache.json"

CATALOG_API_URL = os.getenv(
    "ADOPTION_CATALOG_API_URL",
    "https://data.moa.gov.tw/Service/OpenData/TransService.aspx?UnitId=QcbUEzN6E6DL",
)
CATALOG_TIMEOUT_SECONDS = 10.0
PROXY_CACHE_TTL_SECONDS = 60 * 60 * 6
DISK_CACHE_TTL_SECONDS = 60 * 60 * 24

LOG_LEVEL = os.getenv("ADOPTION_CATALOG_LOG_LEVEL", "INFO")

DEFAULT_PAGE_SIZE = 18
DEFAULT_IMAGE = "https://placehold.co/400x300?text=No+Image"
MAP_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={query}"

ALL_OPTION = "全部"

AREA_OPTIONS = [
    ALL_OPTION,
    "新北市",
    "臺北市",
    "桃園市",
    "新竹市",
    "苗栗縣",
    "臺中市",
    "南投縣",
    "彰化縣",
    "雲林縣",
    "嘉義市",
    "嘉義縣",
    "臺南市",
    "屏東縣",
    "基隆市",
    "宜蘭縣",
    "花蓮縣",
    "臺東縣",
    "澎湖縣",
    "金門縣",
    "連江縣",
]
TYPE_OPTIONS = [ALL_OPTION, "貓", "狗", "其他"]
SEX_OPTIONS = [ALL_OPTION, "公", "母", "未知"]
COLOR_OPTIONS = [ALL_OPTION, "黑色", "白色", "棕色", "灰色", "虎斑", "三色", "花色", "其他"]
BODY_TYPE_OPTIONS = [ALL_OPTION, "小型", "中型", "大型", "未知"]
VARIETY_OPTIONS = [ALL_OPTION, "混種", "短毛", "長毛", "其他"]

SEX_CODES = {
    "公": "M",
    "母": "F",
    "未知": "N",
}

COLOR_KEYWORDS = {
    "黑色": ["黑", "黑色"],
    "白色": ["白", "白色"],
    "棕色": ["棕", "棕色", "茶"],
    "灰色": ["灰", "灰色"],
    "虎斑": ["虎", "虎斑", "斑"],
    "三色": ["三色"],
    "花色": ["花", "花色"],
    "其他": ["其他"],
}

FAVORITE_COLUMNS = [
    "favorite_id",
    "user_name",
    "animal_id",
    "payload",
    "created_at",
]

DETAIL_LABELS = {
    "animal_id": "動物流水編號",
    "animal_subid": "動物管理編號",
    "animal_area_pkid": "動物所屬地區",
    "animal_shelter_pkid": "動物所屬收容所",
    "animal_place": "動物實際所在地",
    "animal_kind": "動物種類",
    "animal_Variety": "動物品種",
    "animal_sex": "動物性別",
    "animal_bodytype": "動物體型",
    "animal_colour": "動物毛色",
    "animal_age": "動物年齡",
    "animal_sterilization": "是否絕育",
    "animal_bacterin": "是否施打疫苗",
    "animal_foundplace": "動物尋獲地",
    "animal_title": "動物標題",
    "animal_status": "動物狀態",
    "animal_remark": "備註",
    "animal_caption": "其他說明",
    "animal_opendate": "開放認養時間",
    "animal_closeddate": "結案時間",
    "animal_update": "資料更新時間",
    "animal_createtime": "資料建立時間",
    "shelter_name": "收容所名稱",
    "album_file": "圖片",
    "album_update": "圖片資料更新時間",
    "cDate": "領養公告日期",
    "shelter_address": "收容所地址",
    "shelter_tel": "收容所電話",
}
