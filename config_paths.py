import codecs
import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "csvdim")
HISTORY_PATH = os.path.join(CONFIG_DIR, "history.log")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
RECORDS_PER_PAGE_DEFAULT = 10
HAS_HEADER_DEFAULT = False
ENCODING_DEFAULT = "utf-8"
HISTORY_SIZE_DEFAULT = 100


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)
    if not os.path.exists(HISTORY_PATH):
        try:
            with open(HISTORY_PATH, "w", encoding="utf-8") as f:
                f.write("")
        except OSError:
            pass


def _positive_int(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _known_encoding(value):
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        codecs.lookup(value.strip())
    except LookupError:
        return False
    return True


def load_config():
    cfg = {
        "RECORDS_PER_PAGE": RECORDS_PER_PAGE_DEFAULT,
        "HAS_HEADER": HAS_HEADER_DEFAULT,
        "ENCODING": ENCODING_DEFAULT,
        "HISTORY_SIZE": HISTORY_SIZE_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    if _positive_int(data.get("records_per_page")):
        cfg["RECORDS_PER_PAGE"] = data["records_per_page"]
    if isinstance(data.get("has_header"), bool):
        cfg["HAS_HEADER"] = data["has_header"]
    encoding = data.get("encoding")
    if _known_encoding(encoding):
        cfg["ENCODING"] = encoding.strip()
    if _positive_int(data.get("history_size")):
        cfg["HISTORY_SIZE"] = data["history_size"]

    return cfg
