"""
Validation configuration loader.

Loads rule sets and message overrides from YAML configuration files.

Expected layout:
    global:
      locale: en
    messages:
      required: ":attribute must be filled in"
    forms:
      signup:
        rules:
          - field: username
            label: Username
            rules: required|minLength[3]
            messages:
              minLength: "Pick a longer username"
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

import yaml

from shared.utils.config import settings
from shared.utils.logger import setup_logger

logger = setup_logger(__name__)


class RuleSetLoader:
    """
    Loads validation rule sets from YAML files.

    Supports:
    - Named forms with their field rules
    - Registry-level message overrides
    - Global settings
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to validation rules YAML file
                        If None, uses settings.VALIDATION_RULES_PATH
        """
        if config_path is None:
            config_path = settings.VALIDATION_RULES_PATH

        self.config_path = Path(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            yaml.YAMLError: If YAML parsing fails
        """
        if not self.config_path.exists():
            logger.warning(
                f"Validation config file not found: {self.config_path}. "
                "Using empty configuration."
            )
            self._config = self._get_default_config()
            return self._config

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logger.info(f"Loaded validation config from: {self.config_path}")
            return self._config

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse validation config: {e}")
            raise

    def get_form_rules(self, form_name: str) -> List[Dict[str, Any]]:
        """
        Get rule descriptors for a named form.

        Args:
            form_name: Form identifier

        Returns:
            List of rule descriptors ({field, label, rules, messages})
        """
        if self._config is None:
            self.load()

        forms = self._config.get('forms') or {}
        form_config = forms.get(form_name) or {}
        return form_config.get('rules') or []

    def get_messages(self) -> Dict[str, str]:
        """
        Get registry-level message overrides.

        Returns:
            Messages keyed by field or predicate name
        """
        if self._config is None:
            self.load()

        return dict(self._config.get('messages') or {})

    def get_global_settings(self) -> Dict[str, Any]:
        """
        Get global validation settings.

        Returns:
            Global settings dictionary
        """
        if self._config is None:
            self.load()

        return self._config.get('global') or {}

    def list_forms(self) -> List[str]:
        """Names of all configured forms."""
        if self._config is None:
            self.load()

        return list((self._config.get('forms') or {}).keys())

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration when file doesn't exist.

        Returns:
            Default configuration dictionary
        """
        return {
            'global': {
                'locale': settings.VALIDATION_LOCALE,
            },
            'messages': {},
            'forms': {}
        }

    def reload(self) -> Dict[str, Any]:
        """
        Reload configuration from file.

        Returns:
            Updated configuration dictionary
        """
        self._config = None
        return self.load()
