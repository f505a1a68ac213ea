"""ContextVar-based lexer configuration for lexkit.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Lexers read the active config once, when they are constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Keep comments as tokens for every lexer created in this context
    from lexkit.config import LexerConfig, lexer_config_context
    from lexkit.scanner import ScanMode

    with lexer_config_context(LexerConfig(mode=ScanMode.GO_TOKENS & ~ScanMode.SKIP_COMMENTS)):
        tokens = consume_all(lex_string("a // note"))

    # Or pass a config to one lexer explicitly
    lexer = TextScannerLexer(stream, config=LexerConfig(chunk_size=65536))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from lexkit.scanner.modes import DEFAULT_CHUNK_SIZE, DEFAULT_WHITESPACE, ScanMode


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        mode: Token categories the scanner recognizes
        whitespace: Characters skipped between tokens
        chunk_size: Number of characters or bytes read from the source at a time

    """

    mode: ScanMode = ScanMode.GO_TOKENS
    whitespace: frozenset[str] = DEFAULT_WHITESPACE
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        # Accept plain ints and any iterable of characters from callers
        object.__setattr__(self, "mode", ScanMode(self.mode))
        object.__setattr__(self, "whitespace", frozenset(self.whitespace))

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexerConfig attribute names.

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "whitespace": " \\t",
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.whitespace)
            ['\\t', ' ']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexerConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "lexer_config_context",
    "reset_lexer_config",
    "set_lexer_config",
]
