"""ContextVar-based configuration for gridtables.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The host sets it once per editing session; parsers and document helpers read
it without it being threaded through every call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from gridtables.config import TableConfig, table_config_context

    with table_config_context(TableConfig(opinionated_sizes=True)):
        formatted = format_tables(source)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TableConfig:
    """Immutable gridtables configuration.

    Attributes:
        opinionated_sizes: Treat the numeric hints on separator lines as the
            column widths the user chose. Reformatting keeps the hints and
            derives structural widths from content. When False, existing
            structural widths are kept as base widths and hints are dropped.
        strict_cell_delimiters: Reject a content line whose column slice does
            not end in ``|`` instead of silently skipping that slice.

    """

    opinionated_sizes: bool = False
    strict_cell_delimiters: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TableConfig":
        """Create TableConfig from dictionary.

        Useful when settings come from the host's own storage. Only includes
        keys that are valid TableConfig fields; unknown keys are ignored.

        Example:
            >>> config = TableConfig.from_dict({
            ...     "opinionated_sizes": True,
            ...     "mySetting": "default",
            ... })
            >>> config.opinionated_sizes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: TableConfig = TableConfig()

_table_config: ContextVar[TableConfig] = ContextVar(
    "table_config",
    default=_DEFAULT_CONFIG,
)


def get_table_config() -> TableConfig:
    """Get current configuration (thread-local)."""
    return _table_config.get()


def set_table_config(config: TableConfig) -> None:
    """Set configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _table_config.set(config)


def reset_table_config() -> None:
    """Reset to the default configuration."""
    _table_config.set(_DEFAULT_CONFIG)


@contextmanager
def table_config_context(config: TableConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with table_config_context(TableConfig(strict_cell_delimiters=True)):
        ...     get_table_config().strict_cell_delimiters
        True

    """
    previous = _table_config.get()
    _table_config.set(config)
    try:
        yield
    finally:
        _table_config.set(previous)


__all__ = [
    "TableConfig",
    "get_table_config",
    "set_table_config",
    "reset_table_config",
    "table_config_context",
]
