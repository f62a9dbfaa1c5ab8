"""
Internationalized logging for the marketplace API
Logs are emitted with translation keys, then rendered in the configured language
"""
import logging
import json
import sys
from enum import StrEnum
from typing import Dict, Optional
from pathlib import Path
from marketplace.config import LANG, LOGLEVEL


DEFAULT_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


class LogLevel(StrEnum):
    """Standard logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class I18nLogger:
    """
    Logger that stores structured logs with translation keys.

    Log calls carry a key such as "product.created" plus keyword parameters.
    The key is looked up in ``locales/<language>.json`` and formatted with
    the parameters; the key and raw parameters travel on the record as extras.

    Example:
        logger.info("product.created", product_id=12, owner_id=7)

        en.json: "Product #{product_id} created by user #{owner_id}"
    """

    _translations_cache: Dict[str, Dict[str, str]] = {}  # Shared cache across instances
    _configured_loggers: set = set()

    def __init__(self, name: str, translations_dir: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.translations_dir = Path(translations_dir) if translations_dir else DEFAULT_LOCALES_DIR

        # Configure logger only once per name
        if name not in I18nLogger._configured_loggers:
            self._configure_logger()
            I18nLogger._configured_loggers.add(name)

    def _configure_logger(self):
        """Attach a colored console handler at the configured level"""
        self.logger.handlers.clear()

        log_level = logging.getLevelName(LOGLEVEL)
        if not isinstance(log_level, int):
            log_level = logging.INFO
        self.logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        self.logger.addHandler(console_handler)

        # Keep records on the root logger too so pytest's caplog sees them
        self.logger.propagate = True

    def _load_translations(self, language: str) -> Dict[str, str]:
        """Load translation file for a language (cached)"""
        if language in I18nLogger._translations_cache:
            return I18nLogger._translations_cache[language]

        translation_file = self.translations_dir / f"{language}.json"
        if not translation_file.exists():
            translation_file = self.translations_dir / "en.json"
            if not translation_file.exists():
                self.logger.warning(f"No translation file found for {language}, using keys as-is")
                return {}

        try:
            with open(translation_file, 'r', encoding='utf-8') as f:
                translations = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.error(f"Failed to load translations for {language}: {e}")
            return {}

        I18nLogger._translations_cache[language] = translations
        return translations

    def _format_message(self, key: str, language: str = LANG, **kwargs) -> str:
        """
        Translate a key and substitute its parameters.

        Unknown keys are returned as-is; a template referencing a missing
        parameter is returned with a note instead of raising.
        """
        template = self._load_translations(language).get(key, key)
        try:
            return template.format_map(kwargs)
        except KeyError as e:
            return f"{template} (missing params: {e})"

    def _log_structured(self, level: LogLevel, key: str, language: str = LANG, exc_info=None, **kwargs):
        message = self._format_message(key, language, **kwargs)
        extra = {
            'translation_key': key,
            'params': kwargs,
            'language': language
        }
        log_method = getattr(self.logger, level.value.lower())
        log_method(message, extra=extra, exc_info=exc_info)

    def debug(self, key: str, language: str = LANG, **kwargs):
        self._log_structured(LogLevel.DEBUG, key, language, **kwargs)

    def info(self, key: str, language: str = LANG, **kwargs):
        self._log_structured(LogLevel.INFO, key, language, **kwargs)

    def warning(self, key: str, language: str = LANG, **kwargs):
        self._log_structured(LogLevel.WARNING, key, language, **kwargs)

    def error(self, key: str, language: str = LANG, **kwargs):
        self._log_structured(LogLevel.ERROR, key, language, **kwargs)

    def exception(self, key: str, language: str = LANG, **kwargs):
        """Log at ERROR level with the active exception's traceback"""
        self._log_structured(LogLevel.ERROR, key, language, exc_info=True, **kwargs)

    def critical(self, key: str, language: str = LANG, **kwargs):
        self._log_structured(LogLevel.CRITICAL, key, language, **kwargs)


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to log levels for better visibility"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Color a copy of the level name so other handlers see the plain one
        original = record.levelname
        if original in self.COLORS:
            record.levelname = f"{self.COLORS[original]}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def get_i18n_logger(name: str, translations_dir: Optional[str] = None) -> I18nLogger:
    """
    Get or create an i18n logger instance

    Args:
        name: Logger name (usually __name__)
        translations_dir: Optional custom path to translations directory

    Returns:
        Configured I18nLogger instance
    """
    return I18nLogger(name, translations_dir)
