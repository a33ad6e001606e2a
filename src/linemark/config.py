"""Processor configuration for linemark.

ProcessorConfig bundles the rule tables a LineProcessor is built from.
It can be constructed directly, or from plain data (JSON, TOML, YAML
already parsed into dicts) via ``ProcessorConfig.from_dict``.

A ContextVar holds the default configuration used by the module-level
``linemark.process`` helper. Until one is set, the built-in Markdown
preset is used.

Usage:
    config = ProcessorConfig.from_dict({
        "default_style": "body",
        "line_rules": [{"token": "# ", "style": "h1", "remove_from": "both"}],
    })
    processor = LineProcessor.from_config(config)

    # Temporarily swap the default used by linemark.process()
    with default_config_context(config):
        lines = linemark.process("# Hello")

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from linemark.errors import RuleConfigError
from linemark.rules import BlockRule, FrontMatterRule, LineRule
from linemark.styles import LineStyle


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    """Immutable processor configuration.

    Rule tables are tuples and keep the order they were supplied in;
    order decides which rule wins.

    Attributes:
        block_rules: Verbatim block region rules
        line_rules: Line classification rules
        default_style: Style for lines no rule matches
        front_matter_rules: Front matter preamble rules
        empty_line_style: Style for blank lines (None skips them)
        strict: Raise on until-close regions left open at end of input

    """

    block_rules: tuple[BlockRule, ...] = ()
    line_rules: tuple[LineRule, ...] = ()
    default_style: LineStyle = LineStyle.BODY
    front_matter_rules: tuple[FrontMatterRule, ...] = ()
    empty_line_style: LineStyle | None = None
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ProcessorConfig":
        """Create ProcessorConfig from dictionary.

        Rules are given as lists of dicts; styles, removal policies and
        scopes by member name. Block start patterns are pattern strings.
        Unknown top-level keys are silently ignored.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New ProcessorConfig instance.

        Raises:
            RuleConfigError: If a rule or style is invalid.

        Example:
            >>> config = ProcessorConfig.from_dict({
            ...     "block_rules": [
            ...         {"start_pattern": "^```", "end_token": "```", "style": "codeblock"},
            ...     ],
            ...     "empty_line_style": "body",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.block_rules[0].end_token
            '```'

        """
        kwargs: dict[str, Any] = {}

        if "block_rules" in config_dict:
            kwargs["block_rules"] = tuple(
                BlockRule.from_dict(rule) for rule in _rule_list(config_dict, "block_rules")
            )
        if "line_rules" in config_dict:
            kwargs["line_rules"] = tuple(
                LineRule.from_dict(rule) for rule in _rule_list(config_dict, "line_rules")
            )
        if "front_matter_rules" in config_dict:
            kwargs["front_matter_rules"] = tuple(
                FrontMatterRule.from_dict(rule)
                for rule in _rule_list(config_dict, "front_matter_rules")
            )
        if "default_style" in config_dict:
            kwargs["default_style"] = _style(config_dict["default_style"])
        if config_dict.get("empty_line_style") is not None:
            kwargs["empty_line_style"] = _style(config_dict["empty_line_style"])
        if "strict" in config_dict:
            kwargs["strict"] = bool(config_dict["strict"])

        return cls(**kwargs)


def _rule_list(config_dict: Mapping[str, Any], key: str) -> list:
    rules = config_dict[key]
    if not isinstance(rules, list | tuple):
        raise RuleConfigError(key, f"expected a list of rules, got {type(rules).__name__}")
    return list(rules)


def _style(value: Any) -> LineStyle:
    if isinstance(value, LineStyle):
        return value
    return LineStyle.from_name(str(value))


# None means "use the built-in Markdown preset"
_default_config: ContextVar[ProcessorConfig | None] = ContextVar(
    "default_config",
    default=None,
)


def get_default_config() -> ProcessorConfig:
    """Get the default configuration for the current context.

    Returns:
        The configuration set with set_default_config, or the Markdown
        preset if none was set.

    Thread Safety:
        ContextVars are thread-local by design. Safe to call from any thread.

    """
    config = _default_config.get()
    if config is None:
        # Import here to avoid circular import at module load
        from linemark.presets import markdown_config

        return markdown_config()
    return config


def set_default_config(config: ProcessorConfig) -> None:
    """Set the default configuration for the current context."""
    _default_config.set(config)


def reset_default_config() -> None:
    """Reset to the built-in Markdown preset."""
    _default_config.set(None)


@contextmanager
def default_config_context(config: ProcessorConfig) -> Iterator[None]:
    """Context manager for temporary default config changes.

    Args:
        config: ProcessorConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _default_config.get()
    _default_config.set(config)
    try:
        yield
    finally:
        _default_config.set(previous)


__all__ = [
    "ProcessorConfig",
    "default_config_context",
    "get_default_config",
    "reset_default_config",
    "set_default_config",
]
