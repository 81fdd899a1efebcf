"""
Fixed Constants.

Values dictated by the remote order service: envelope codes, dldata
positions, the hero table and the status/mode codes. Tunable values
(endpoint, timeouts, retry policy) live in config/settings/application.yaml.
"""

SUCCESS_CODE = 1

# dldata layout
MIN_DLDATA_LENGTH = 13
BASIC_INFO_SIZE = 10
DATE_INDEX = 3
WINS_INDEX = 4
LOSSES_INDEX = 5
GOLD_RECORDS_INDEX = 10
EXP_RECORDS_INDEX = 11
BATTLE_RECORDS_INDEX = 12

# minimum row arity per record kind
GOLD_ROW_MIN = 3
EXP_ROW_MIN = 5
BATTLE_ROW_MIN = 4

# bit i of a hero mask selects HERO_NAMES[i]
HERO_NAMES = (
    "战士",
    "萨满祭司",
    "潜行者",
    "圣骑士",
    "猎人",
    "德鲁伊",
    "术士",
    "法师",
    "牧师",
    "恶魔猎手",
    "死亡骑士",
)
MAX_HERO_MASK = (1 << len(HERO_NAMES)) - 1
HERO_ALL_ALIASES = frozenset({"all", "全部"})

# order status codes
STATUS_FINISHED = "1"
STATUS_RUNNING = "0"
STATUS_BANNED = "1"

# battle mode codes
MODE_CASUAL = "1"
MODE_STANDARD = "2"
MODE_WILD = "3"
MODE_TWIST = "4"
MODE_BATTLEGROUNDS = "5"

MODE_NAMES = {
    MODE_CASUAL: "休闲模式",
    MODE_STANDARD: "标准模式",
    MODE_WILD: "狂野模式",
    MODE_TWIST: "幻变模式",
    MODE_BATTLEGROUNDS: "酒馆战棋",
}

# auto-claim flag values
AUTO_ON = "1"
AUTO_OFF = "0"

# battle result codes
BATTLE_WIN = 1
BATTLE_LOSS = -1
BATTLE_UNKNOWN = 0

RESULT_WIN = "胜利"
RESULT_LOSS = "失败"
RESULT_UNKNOWN = "未知"

UNKNOWN_TIME = "未知时间"
INVALID_TIME = "时间格式错误"

SHANGHAI_UTC_OFFSET_HOURS = 8
