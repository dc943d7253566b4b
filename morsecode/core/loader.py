# morsecode/core/loader.py

"""Symbol table loader for the Morse dictionary."""

import yaml
import logging
import threading
from pathlib import Path
from typing import Dict, Any, Optional

from morsecode.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent / "symbols.yaml"


class SymbolTableLoader:
    """Singleton loader for the character to token table.

    Loads symbols.yaml once and caches it for the application lifecycle.
    Thread-safe for concurrent first use.
    """

    _instance: Optional["SymbolTableLoader"] = None
    _lock = threading.Lock()

    def __init__(self, table_path: Optional[Path] = None) -> None:
        self.table_path = Path(table_path) if table_path else DEFAULT_TABLE_PATH
        self._config: Dict[str, Any] = {}
        self._table: Dict[str, str] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Loads the symbol table file.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        try:
            if not self.table_path.exists():
                error_msg = f"Symbol table not found: {self.table_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(self.table_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f)

            if not self._config:
                raise ConfigurationError("Symbol table file is empty or invalid")

            self._validate_config()

            # Flatten categories into one lookup table
            for category, entries in self._config["symbols"].items():
                for char, token in (entries or {}).items():
                    self._table[str(char)] = str(token)

            logger.info(
                "Symbol table loaded successfully",
                extra={
                    "table_path": str(self.table_path),
                    "category_count": len(self._config["symbols"]),
                    "symbol_count": len(self._table),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse symbol table: {e}") from e
        except Exception as e:
            if isinstance(e, ConfigurationError):
                raise
            logger.error(f"Symbol table loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load symbol table: {e}") from e

    def _validate_config(self) -> None:
        """Validates the 'symbols' section exists and holds mappings.

        Raises:
            ConfigurationError: If the section is missing or malformed.
        """
        symbols = self._config.get("symbols") if isinstance(self._config, dict) else None

        if not isinstance(symbols, dict):
            error_msg = "Missing required configuration section: 'symbols'"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        bad = [k for k, v in symbols.items() if v is not None and not isinstance(v, dict)]
        if bad:
            error_msg = f"Symbol categories must be mappings: {bad}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

    @classmethod
    def get_instance(cls) -> "SymbolTableLoader":
        """Returns the singleton loader for the packaged table."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get_table(self) -> Dict[str, str]:
        """Returns a copy of the flattened character to token table."""
        return dict(self._table)

    def get_category(self, category: str) -> Dict[str, str]:
        """Retrieves the entries of one category (e.g. 'letters').

        Args:
            category: Category name in symbols.yaml

        Returns:
            Mapping of characters to tokens, empty if category not found
        """
        entries = self._config.get("symbols", {}).get(category) or {}
        return {str(k): str(v) for k, v in entries.items()}
