"""
Message resource service.

Language lines used by the error formatter when neither the rule nor the
registry defines a message. Lines live in YAML files laid out as
<language_dir>/<locale>/<domain>.yaml and are keyed by identifiers such
as IS_REQUIRED or IS_MINLENGTH.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)

VALIDATION_DOMAIN = "validation"


class MessageResource(ABC):
    """
    Abstract interface for language line lookup.

    Example:
        class DictMessageResource(MessageResource):
            def load_domain(self, domain): ...
            def get_line(self, key): return self.lines.get(key)
    """

    @abstractmethod
    def load_domain(self, domain: str) -> None:
        """
        Make the lines of a domain available to get_line().

        Args:
            domain: Domain name, e.g. "validation"
        """
        pass

    @abstractmethod
    def get_line(self, key: str) -> Optional[str]:
        """
        Get a language line.

        Args:
            key: Line identifier

        Returns:
            Line text or None if not defined
        """
        pass

    def lookup(self, key: str, domain: str = VALIDATION_DOMAIN) -> Optional[str]:
        """Load the domain and return the line for key, if any."""
        self.load_domain(domain)
        return self.get_line(key) or None


class NullMessageResource(MessageResource):
    """Resource with no lines; every lookup misses."""

    def load_domain(self, domain: str) -> None:
        pass

    def get_line(self, key: str) -> Optional[str]:
        return None


class YamlMessageResource(MessageResource):
    """
    Loads language lines from YAML files.

    Domains are loaded once and cached. A missing file yields an empty
    domain; an unparsable file raises yaml.YAMLError.
    """

    def __init__(
        self,
        language_dir: Optional[Union[str, Path]] = None,
        locale: Optional[str] = None
    ):
        """
        Initialize resource.

        Args:
            language_dir: Directory holding one sub-directory per locale
                          If None, uses settings.language_dir
            locale: Locale sub-directory, defaults to settings.VALIDATION_LOCALE
        """
        self.language_dir = Path(language_dir) if language_dir else settings.language_dir
        self.locale = locale or settings.VALIDATION_LOCALE
        self._domains: Dict[str, Dict[str, str]] = {}
        self._lines: Dict[str, str] = {}

    def load_domain(self, domain: str) -> None:
        if domain not in self._domains:
            self._domains[domain] = self._read_domain(domain)
        self._lines.update(self._domains[domain])

    def get_line(self, key: str) -> Optional[str]:
        return self._lines.get(key)

    def _read_domain(self, domain: str) -> Dict[str, str]:
        path = self.language_dir / self.locale / f"{domain}.yaml"

        if not path.exists():
            logger.warning(f"Language file not found: {path}. Using no lines.")
            return {}

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse language file {path}: {e}")
            raise

        if not isinstance(data, dict):
            logger.warning(
                f"Language file {path} does not contain a mapping of lines. Using no lines."
            )
            return {}

        logger.info(f"Loaded {len(data)} language lines from: {path}")
        return {str(key): str(line) for key, line in data.items() if line is not None}
