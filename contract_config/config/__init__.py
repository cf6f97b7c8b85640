# contract_config/config/__init__.py

from .tree import ConfigTree, resolve_config_path
from .accessor import ConfigAccessor
