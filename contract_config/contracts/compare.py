# contract_config/contracts/compare.py

from typing import Optional

from .abi import ParsedABI
from ..core.errors import (
    ABIMismatchError,
    MismatchedConstructorsError,
    MismatchedOuterMethodsError,
    MismatchedOuterEventsError,
)


def compare_contract_abi(a: ParsedABI, b: ParsedABI, strict: bool = False) -> None:
    """Raise the first structural mismatch between two parsed ABIs.

    Checks the constructor, then every method of ``a``, then every event of
    ``a``, each in name order, against the same name in ``b``. Names only
    present in ``b`` are ignored unless ``strict`` is set, in which case they
    are checked last (methods before events).
    """
    if a.constructor_signature() != b.constructor_signature():
        raise MismatchedConstructorsError(a.constructor_signature(), b.constructor_signature())

    for name in sorted(a.methods):
        if a.method_signature(name) != b.method_signature(name):
            raise MismatchedOuterMethodsError(name, a.method_signature(name), b.method_signature(name))

    for name in sorted(a.events):
        if a.event_signature(name) != b.event_signature(name):
            raise MismatchedOuterEventsError(name, a.event_signature(name), b.event_signature(name))

    if not strict:
        return

    extra_methods = sorted(set(b.methods) - set(a.methods))
    if extra_methods:
        name = extra_methods[0]
        raise MismatchedOuterMethodsError(name, "", b.method_signature(name))

    extra_events = sorted(set(b.events) - set(a.events))
    if extra_events:
        name = extra_events[0]
        raise MismatchedOuterEventsError(name, "", b.event_signature(name))


def find_abi_mismatch(a: ParsedABI, b: ParsedABI, strict: bool = False) -> Optional[ABIMismatchError]:
    try:
        compare_contract_abi(a, b, strict=strict)
    except ABIMismatchError as e:
        return e
    return None
