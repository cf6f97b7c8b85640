# contract_config/core/__init__.py
