# contract_config/core/errors.py

from typing import Optional


class ContractConfigError(Exception):
    """Base exception for contract configuration errors."""
    pass


class ConfigFileError(ContractConfigError):
    """Raised when the configuration file cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ConfigFileNotFoundError(ConfigFileError):
    """Raised when no configuration file can be located."""
    pass


class ConfigValueError(ContractConfigError):
    """Raised when a configured value has the wrong shape."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class MissingConfigError(ContractConfigError):
    """Raised when a required configuration key is absent or empty."""

    def __init__(self, key: str, message: Optional[str] = None):
        super().__init__(message or f'No environment configuration variable set for key: "{key}"')
        self.key = key


class EmptyContractListError(ContractConfigError):
    """Raised when a multi-contract operation receives no contract names."""
    pass


class ABIParseError(ContractConfigError):
    """Raised when a raw ABI string cannot be decoded."""

    def __init__(self, message: str, contract: Optional[str] = None):
        super().__init__(message)
        self.contract = contract


class ABIMismatchError(ContractConfigError):
    """Base for structural differences between two ABIs."""
    pass


class MismatchedConstructorsError(ABIMismatchError):
    def __init__(self, constructor_one: str, constructor_two: str):
        self.constructor_one = constructor_one
        self.constructor_two = constructor_two
        super().__init__(
            f"constructors don't match constructorOne: {constructor_one}, "
            f"constructorTwo: {constructor_two}"
        )


class MismatchedOuterMethodsError(ABIMismatchError):
    def __init__(self, method: str, method_one: str, method_two: str):
        self.method = method
        self.method_one = method_one
        self.method_two = method_two
        super().__init__(
            f"outer methods don't match for method {method}, "
            f"method one: {method_one}, method two: {method_two}"
        )


class MismatchedOuterEventsError(ABIMismatchError):
    def __init__(self, event: str, event_one: str, event_two: str):
        self.event = event
        self.event_one = event_one
        self.event_two = event_two
        super().__init__(
            f"outer events don't match for event {event}, "
            f"event one: {event_one}, event two: {event_two}"
        )


class MismatchedContractABIError(ContractConfigError):
    """Raised when contracts sharing a transformer expose different ABIs."""

    def __init__(self, first: str, other: str, reason: ABIMismatchError):
        self.first = first
        self.other = other
        self.reason = reason
        super().__init__(
            f"ABIs don't match for contracts: {first} and {other}. Reason: {reason}"
        )
