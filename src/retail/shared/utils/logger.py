# 📜 retail/shared/utils/logger.py
"""
📜 Налаштування логування retail-checkout.

🔹 Усі логери проєкту: нащадки `LOG_NAME` (`retail_checkout.domain.cart` тощо).
🔹 Консоль пише у stderr, щоб не змішуватись із чеками у stdout.
🔹 Файл: з добовою ротацією, у текстовому або JSON-форматі (з полями `extra`).
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                         # 📦 JSON-рядки логів
import logging                                                      # 🪵 Стандартне логування
import sys                                                          # 🧵 stderr
import threading                                                    # 🔒 Ініціалізація з кількох потоків
from dataclasses import dataclass, field, fields                    # 🧱 Опис налаштувань
from logging.handlers import TimedRotatingFileHandler               # 📁 Ротація файлів
from pathlib import Path                                            # 📂 Шлях до лог-файлу
from typing import Any, Dict, Mapping, Optional, Union              # 🧰 Типізація

# ================================
# 🧾 КОНСТАНТИ
# ================================
LOG_NAME: str = "retail_checkout"                                   # 🏷️ Корінь ієрархії логерів
DEFAULT_LOG_FILE: str = "logs/checkout.log"                         # 📁 Типовий файл
FILE_FORMAT: str = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d | %(message)s"
CONSOLE_FORMAT: str = "[%(levelname).1s] %(message)s"

_OWNED_FLAG = "_retail_checkout_handler"                            # 🏷️ Позначка наших хендлерів
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}                              # 🚫 Не вважаємо їх extra

_init_lock = threading.Lock()


# ================================
# ⚙️ НАЛАШТУВАННЯ
# ================================
@dataclass
class LoggingConfig:
    """Секція `logging` конфігурації; невідомі ключі ігноруються."""
    level: str = "INFO"
    console: bool = True
    json: bool = False                                              # 📦 JSON лише для файлу
    file: Optional[str] = DEFAULT_LOG_FILE                          # 📁 None → без файлу
    console_level: Optional[str] = None                             # 🖥️ None → як `level`
    file_level: Optional[str] = None                                # 📁 None → як `level`
    console_format: str = CONSOLE_FORMAT
    file_format: str = FILE_FORMAT
    when: str = "midnight"
    backup_count: int = 7
    suppress: Dict[str, str] = field(default_factory=dict)         # 🙊 логер → рівень

    @classmethod
    def from_mapping(cls, node: Optional[Mapping[str, Any]]) -> "LoggingConfig":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (node or {}).items() if k in known and v is not None}
        if "file" in (node or {}) and not node["file"]:              # 📁 Явне `file: null` вимикає файл
            values["file"] = None
        return cls(**values)


# ================================
# 🧰 ФОРМАТЕР
# ================================
class JsonFormatter(logging.Formatter):
    """Один JSON-обʼєкт на запис: базові поля + усе, що прийшло через `extra`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
            "message": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS and not k.startswith("_")}
        for key, value in extras.items():
            payload.setdefault(key, value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)  # 🔄 Decimal/datetime → str


# ================================
# 🛠️ ВНУТРІШНІ ХЕЛПЕРИ
# ================================
def _level(value: Union[str, int, None], fallback: int) -> int:
    if isinstance(value, int):
        return value
    if not value:
        return fallback
    resolved = logging.getLevelName(str(value).upper())
    return resolved if isinstance(resolved, int) else fallback


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_FLAG, True)
    return handler


def _drop_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def _file_handler(cfg: LoggingConfig) -> TimedRotatingFileHandler:
    path = Path(str(cfg.file))
    path.parent.mkdir(parents=True, exist_ok=True)                   # 🧱 logs/ може ще не існувати
    return TimedRotatingFileHandler(path, when=cfg.when, backupCount=cfg.backup_count, encoding="utf-8")


# ================================
# 🚀 ПУБЛІЧНИЙ API
# ================================
def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """Застосовує `cfg` до кореневого логера; попередні наші хендлери замінюються."""
    base = _level(cfg.level, logging.INFO)
    console_level = _level(cfg.console_level, base)
    file_level = _level(cfg.file_level, base)

    with _init_lock:
        root = logging.getLogger(LOG_NAME)
        _drop_owned_handlers(root)

        active = [console_level] if cfg.console else []
        if cfg.console:
            console = logging.StreamHandler(sys.stderr)
            root.addHandler(_own(console, console_level, logging.Formatter(cfg.console_format)))
        if cfg.file:
            formatter = JsonFormatter() if cfg.json else logging.Formatter(cfg.file_format)
            root.addHandler(_own(_file_handler(cfg), file_level, formatter))
            active.append(file_level)
        root.setLevel(min(active or [base]))                          # 🎚️ Пропускаємо все, що потрібно хоч одному хендлеру

        for name, level in cfg.suppress.items():
            logging.getLogger(name).setLevel(_level(level, logging.WARNING))

    root.info(
        "✅ Logging ready | console=%s file=%s json=%s",
        logging.getLevelName(console_level) if cfg.console else "off",
        f"{cfg.file}@{logging.getLevelName(file_level)}" if cfg.file else "off",
        cfg.json,
    )
    return root


def init_logging(
    *,
    level: Optional[str] = None,
    console: Optional[bool] = None,
    json_mode: Optional[bool] = None,
    file: Optional[str] = DEFAULT_LOG_FILE,
    suppress: Optional[Dict[str, str]] = None,
    console_level: Optional[Union[str, int]] = None,
    file_level: Optional[Union[str, int]] = None,
) -> logging.Logger:
    """Програмний варіант `configure_logging` з іменованими параметрами."""
    cfg = LoggingConfig(
        level=level or "INFO",
        console=True if console is None else console,
        json=bool(json_mode),
        file=file or None,
        console_level=console_level,
        file_level=file_level,
        suppress=dict(suppress or {}),
    )
    return configure_logging(cfg)


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """Ініціалізація з секції `logging` ConfigService."""
    return configure_logging(LoggingConfig.from_mapping(config))


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """`get_logger("domain.cart")` → `retail_checkout.domain.cart`."""
    return logging.getLogger(f"{LOG_NAME}.{suffix}" if suffix else LOG_NAME)


__all__ = [
    "LOG_NAME",
    "DEFAULT_LOG_FILE",
    "LoggingConfig",
    "JsonFormatter",
    "configure_logging",
    "init_logging",
    "init_logging_from_config",
    "get_logger",
]
