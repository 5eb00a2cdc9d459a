# topmark:header:start
#
#   project      : ReflowMark
#   file         : getters.py
#   file_relpath : src/reflowmark/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Every getter validates the expected shape of one key. A value of the wrong
type is not coerced: it is reported as a **warning** in a `DiagnosticLog`
(and logged), and the getter returns ``None`` so the caller keeps the value
inherited from a lower configuration layer.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeGuard, TypeVar

if TYPE_CHECKING:
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.core.diagnostics import DiagnosticLog

    from .types import TomlTable

E = TypeVar("E", bound=Enum)


def is_toml_table(obj: object) -> TypeGuard[dict[str, Any]]:
    """Type guard for a TOML table (a ``dict`` with string keys)."""
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value; item types are not checked."""
    return isinstance(obj, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ReflowmarkLogger,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ReflowmarkLogger,
) -> bool | None:
    """Return an optional boolean value, warning when present but not `bool`.

    Integers are **not** coerced: ``clear_blank_lines = 1`` is reported.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ReflowmarkLogger,
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - A value below ``minimum`` is clamped to ``minimum`` with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if minimum is not None and value < minimum:
        logger.warning("Value %d in %s is below %d; clamping", value, loc, minimum)
        diagnostics.add_warning(f"Value {value} in {loc} is below {minimum}; using {minimum}")
        return minimum

    return value


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ReflowmarkLogger,
) -> list[str] | None:
    """Extract an optional list of strings, recording warnings for bad entries.

    Behavior:
        - If the key is missing, returns None.
        - If the value is not a list, warns and returns None.
        - Non-string items are dropped, each with a warning.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[tags]").
        diagnostics (DiagnosticLog): DiagnosticLog to record warnings.
        logger (ReflowmarkLogger): Logger for emitting warnings.

    Returns:
        list[str] | None: Filtered list containing only string entries, or None.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not is_any_list(value):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")

    return out


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: ReflowmarkLogger,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    try:
        return enum_cls(raw)
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None
