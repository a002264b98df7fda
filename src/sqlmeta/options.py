import pathlib
from dataclasses import dataclass

from libb import ConfigOptions

__all__ = ['MetadataOptions']


@dataclass
class MetadataOptions(ConfigOptions):
    """Options

    - case_sensitive_complex: Match ``map<``/``array<``/``struct<`` prefixes
      case-sensitively (default: False)
    - parse_type_parameters: Keep ``decimal(p,s)``, ``char(n)`` and
      ``varchar(n)`` parameters for size/precision/scale (default: True).
      When False, sizes come from the type code alone.
    - cache_size: Maximum resolved raw types kept per mapper (default: 256)
    - type_mapping_file: Optional JSON file of engine type aliases
    """
    case_sensitive_complex: bool = False
    parse_type_parameters: bool = True
    cache_size: int = 256
    type_mapping_file: str = None

    def __post_init__(self):
        if self.cache_size < 0:
            raise ValueError(f'cache_size must be >= 0, got {self.cache_size}')
        if self.type_mapping_file and not pathlib.Path(self.type_mapping_file).exists():
            raise ValueError(f'type_mapping_file not found: {self.type_mapping_file}')
