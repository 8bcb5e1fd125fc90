"""Exception hierarchy for the parameter registries."""

from __future__ import annotations

from typing import Any


class XmssParameterError(Exception):
    """
    Base exception for all parameter registry errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UnknownParameterSetError(XmssParameterError, LookupError):
    """
    Raised when a name does not match any canonical parameter set name.

    This is an ordinary, recoverable condition: the caller supplied a
    configuration string that the registry does not know.

    Attributes:
        name: The rejected name, exactly as supplied.
        registry: Which registry rejected it ("XMSS" or "WOTS+").
    """

    def __init__(self, name: str, *, registry: str = "XMSS") -> None:
        self.name = name
        self.registry = registry
        super().__init__(f"Unknown {registry} algorithm param '{name}'")


class UnsupportedAlgorithmIdError(XmssParameterError, NotImplementedError):
    """
    Raised when an identifier outside the closed enumeration reaches record construction.

    Unlike a name lookup miss, this signals a logic defect in the caller,
    e.g. an integer used as an identifier without being validated first.

    Attributes:
        oid: The offending identifier value.
        registry: Which registry was queried ("XMSS" or "WOTS+").
    """

    def __init__(self, oid: Any, *, registry: str = "XMSS") -> None:
        self.oid = oid
        self.registry = registry

        is_code = isinstance(oid, int) and not isinstance(oid, bool) and oid >= 0
        oid_repr = f"0x{oid:08x}" if is_code else repr(oid)
        super().__init__(
            f"Algorithm id {oid_repr} does not match any known {registry} algorithm id"
        )


class RegistryIntegrityError(XmssParameterError):
    """
    Raised when a static parameter table fails its load-time consistency check.

    Attributes:
        registry: The registry whose table is malformed.
        detail: Description of what went wrong.
    """

    def __init__(self, registry: str, detail: str) -> None:
        self.registry = registry
        self.detail = detail
        super().__init__(f"{registry} parameter registry is inconsistent: {detail}")
