"""
Configuration for engine type aliases.
"""
import json
import logging
import pathlib

logger = logging.getLogger(__name__)


class TypeMappingConfig:
    """Configuration for custom engine type aliases

    An alias maps an extra engine type name (e.g. ``long``) onto one of the
    built-in raw type keys (e.g. ``bigint``). Keys are stored lower-case.
    """

    _instance = None

    @classmethod
    def get_instance(cls):
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self, config_file=None):
        self._aliases: dict[str, str] = {}
        self.generation = 0

        if config_file:
            self.load_config(config_file)
        else:
            default_locations = [
                pathlib.Path('~/.config/sqlmeta/type_mapping.json').expanduser(),
                '/etc/sqlmeta/type_mapping.json',
                'type_mapping.json'  # Current directory
            ]

            for location in default_locations:
                if pathlib.Path(location).exists():
                    self.load_config(location)
                    break

    def load_config(self, config_file):
        """Load aliases from file, merging over what is already loaded"""
        try:
            with pathlib.Path(config_file).open() as f:
                config = json.load(f)
            aliases = config.get('aliases', {})
            if not isinstance(aliases, dict):
                raise TypeError(f'aliases must be an object, got {type(aliases).__name__}')
        except Exception as e:
            logger.warning(f'Failed to load type mapping config: {e}')
            return

        for name, target in aliases.items():
            if not isinstance(target, str):
                logger.warning(f'Ignoring alias {name!r}: target must be a string')
                continue
            self.add_alias(name, target)

        logger.info(f'Loaded type mapping configuration from {config_file}')

    def add_alias(self, name: str, target: str) -> None:
        """Add an engine type alias

        Bumps ``generation`` so mappers drop resolutions made under the
        previous aliases.
        """
        self._aliases[name.lower()] = target.lower()
        self.generation += 1

    def get_alias(self, name: str) -> str | None:
        """Get the built-in key an engine type name is aliased to"""
        return self._aliases.get(name.lower())

    @property
    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)
