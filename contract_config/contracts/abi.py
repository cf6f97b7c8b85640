# contract_config/contracts/abi.py

"""
Typed view over JSON contract ABIs.

Decodes a raw ABI string into a ParsedABI holding the constructor plus
methods and events keyed by unique name, each with a canonical string form
used for structural comparison.
"""

from typing import Dict, List, Optional, Union

import msgspec
from msgspec import Struct, field
from eth_abi.exceptions import ABITypeError, ParseError
from eth_abi.grammar import TupleType, parse as parse_type_str
from eth_utils.abi import collapse_if_tuple

from ..core.errors import ABIParseError


BASE_TYPES = frozenset({
    "address", "bool", "bytes", "fixed", "function", "int", "string", "ufixed", "uint",
})


class ABIParameter(Struct):
    type: str
    name: str = ""
    indexed: bool = False
    internalType: Optional[str] = None
    components: Optional[List["ABIParameter"]] = None

    @property
    def canonical_type(self) -> str:
        return collapse_if_tuple(msgspec.to_builtins(self))

    def validate(self) -> None:
        """Raise ValueError unless the type (and any tuple components) is a valid ABI type"""
        if self.type.startswith("tuple"):
            if not self.components:
                raise ValueError(f"tuple parameter {self.name or '<unnamed>'} has no components")
            for component in self.components:
                component.validate()

        try:
            abi_type = parse_type_str(self.canonical_type)
            abi_type.validate()
        except (ParseError, ABITypeError) as e:
            raise ValueError(f"unsupported arg type: {self.type}: {e}") from e
        _check_base_types(abi_type, self.type)


def _check_base_types(abi_type, raw_type: str) -> None:
    if isinstance(abi_type, TupleType):
        for component in abi_type.components:
            _check_base_types(component, raw_type)
    elif abi_type.base not in BASE_TYPES:
        raise ValueError(f"unsupported arg type: {raw_type}")


class ABIEntry(Struct):
    type: str = "function"
    name: str = ""
    inputs: Optional[List[ABIParameter]] = None
    outputs: Optional[List[ABIParameter]] = None
    stateMutability: Optional[str] = None
    constant: Optional[bool] = None
    payable: Optional[bool] = None
    anonymous: bool = False

    @property
    def mutability(self) -> str:
        if self.stateMutability:
            return self.stateMutability
        if self.constant:
            return "view"
        if self.payable:
            return "payable"
        return "nonpayable"


class ABIArtifact(Struct):
    """Build artifact wrapping the ABI under an ``abi`` key"""
    abi: List[ABIEntry]


def _param_str(param: ABIParameter) -> str:
    return f"{param.canonical_type} {param.name}" if param.name else param.canonical_type


class ABIMethod(Struct, frozen=True):
    name: str
    raw_name: str
    inputs: List[ABIParameter] = field(default_factory=list)
    outputs: List[ABIParameter] = field(default_factory=list)
    state_mutability: str = "nonpayable"
    is_constructor: bool = False

    @property
    def signature(self) -> str:
        identity = "constructor" if self.is_constructor else f"function {self.raw_name}"
        inputs = ", ".join(_param_str(p) for p in self.inputs)
        outputs = ", ".join(_param_str(p) for p in self.outputs)
        state = "" if self.state_mutability == "nonpayable" else f"{self.state_mutability} "
        return f"{identity}({inputs}) {state}returns({outputs})"

    def __str__(self) -> str:
        return self.signature


class ABIEvent(Struct, frozen=True):
    name: str
    raw_name: str
    inputs: List[ABIParameter] = field(default_factory=list)
    anonymous: bool = False

    @property
    def signature(self) -> str:
        params = []
        for p in self.inputs:
            indexed = " indexed" if p.indexed else ""
            label = f" {p.name}" if p.name else ""
            params.append(f"{p.canonical_type}{indexed}{label}")
        return f"event {self.raw_name}({', '.join(params)})"

    def __str__(self) -> str:
        return self.signature


class ParsedABI(Struct):
    constructor: Optional[ABIMethod] = None
    methods: Dict[str, ABIMethod] = field(default_factory=dict)
    events: Dict[str, ABIEvent] = field(default_factory=dict)

    def constructor_signature(self) -> str:
        return self.constructor.signature if self.constructor else ""

    def method_signature(self, name: str) -> str:
        method = self.methods.get(name)
        return method.signature if method else ""

    def event_signature(self, name: str) -> str:
        event = self.events.get(name)
        return event.signature if event else ""


def _unique_name(raw_name: str, taken: Dict[str, object]) -> str:
    # overloads resolve as name, name0, name1, ...
    name = raw_name
    idx = 0
    while name in taken:
        name = f"{raw_name}{idx}"
        idx += 1
    return name


def parse_abi(raw: Union[str, bytes], contract: Optional[str] = None) -> ParsedABI:
    """Decode a raw JSON ABI (bare list or ``{"abi": [...]}`` artifact)"""
    try:
        decoded = msgspec.json.decode(raw, type=Union[List[ABIEntry], ABIArtifact])
    except (msgspec.DecodeError, msgspec.ValidationError) as e:
        label = f" for {contract}" if contract else ""
        raise ABIParseError(f"unable to parse ABI{label}: {e}", contract=contract) from e

    entries = decoded.abi if isinstance(decoded, ABIArtifact) else decoded
    parsed = ParsedABI()

    for entry in entries:
        if entry.type in ("constructor", "function", "event"):
            try:
                for param in (entry.inputs or []) + (entry.outputs or []):
                    param.validate()
            except ValueError as e:
                label = f" for {contract}" if contract else ""
                raise ABIParseError(f"unable to parse ABI{label}: {entry.name or entry.type}: {e}",
                                    contract=contract) from e

        if entry.type == "constructor":
            parsed.constructor = ABIMethod(
                name="",
                raw_name="",
                inputs=list(entry.inputs or []),
                state_mutability=entry.mutability,
                is_constructor=True,
            )
        elif entry.type == "function":
            name = _unique_name(entry.name, parsed.methods)
            parsed.methods[name] = ABIMethod(
                name=name,
                raw_name=entry.name,
                inputs=list(entry.inputs or []),
                outputs=list(entry.outputs or []),
                state_mutability=entry.mutability,
            )
        elif entry.type == "event":
            name = _unique_name(entry.name, parsed.events)
            parsed.events[name] = ABIEvent(
                name=name,
                raw_name=entry.name,
                inputs=list(entry.inputs or []),
                anonymous=entry.anonymous,
            )
        # fallback, receive and error entries carry no outer interface

    return parsed
