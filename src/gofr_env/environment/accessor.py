"""Schema-driven access to environment variables.

The Environment holds a read-only schema and a mutable store (``os.environ``
unless another mapping is injected). ``get`` never raises: it returns a
``Result`` holding either the typed value or an EnvironmentVariableError.
``get_expect`` and ``snapshot`` raise the error instead.

Example:
    env = Environment({
        "PORT": number_var(format="integer", min=1, max=65535, default=8000),
        "DEBUG": boolean_var(default=False),
    })

    port = env.get_expect("PORT")
    debug = env.get("DEBUG").unwrap_or(False)

Overrides for tests:
    with env.overridden({"DEBUG": "true"}):
        assert env.get_expect("DEBUG") is True
"""

import logging
import os
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, MutableMapping, Optional, TypeVar

from result import Err, Ok, Result

from gofr_env.environment.errors import (
    EnvironmentVariableError,
    VariableNotFoundError,
    VariableParseError,
    VariableUnknownError,
)
from gofr_env.environment.parsers import parse_value
from gofr_env.environment.types import EnvironmentConfig, VariableConfig
from gofr_env.logger import DefaultLogger, Logger

R = TypeVar("R")

UNKNOWN_VARIABLE_MESSAGE = (
    "The environment variable is not defined in the configuration. "
    "Please check the configuration."
)


def _unwrap(result: Result[Any, EnvironmentVariableError]) -> Any:
    """Return the value of a result or raise the error it carries."""
    if isinstance(result, Err):
        raise result.err_value
    return result.ok_value


class Environment:
    """Typed accessor for environment variables declared in a schema."""

    def __init__(
        self,
        config: EnvironmentConfig,
        store: Optional[MutableMapping[str, str]] = None,
        logger: Optional[Logger] = None,
    ):
        """Initialize the environment.

        Args:
            config: Mapping of variable name to variable configuration
            store: Mapping the raw values are read from and written to.
                Defaults to os.environ. The mapping is used directly, not copied.
            logger: Optional logger instance. Creates one if not provided.
        """
        self.config: Mapping[str, VariableConfig] = MappingProxyType(dict(config))
        self.store: MutableMapping[str, str] = store if store is not None else os.environ
        if logger is not None:
            self.logger = logger
        else:
            self.logger = DefaultLogger(name="gofr-env", level=logging.WARNING)

    def get(self, key: str) -> Result[Any, EnvironmentVariableError]:
        """Get an environment variable.

        Args:
            key: The name of the environment variable

        Returns:
            Ok with the typed value, or Err with the reason it is unavailable
        """
        return self._get_inner(key)

    def get_expect(self, key: str, message: Optional[str] = None) -> Any:
        """Get an environment variable, expecting it to be available.

        Args:
            key: The name of the environment variable
            message: Replaces the error message if the variable is unavailable

        Returns:
            The typed value

        Raises:
            EnvironmentVariableError: If the variable is unknown, missing or invalid
        """
        result = self._get_inner(key)
        if message is not None:
            result = result.map_err(lambda error: error.with_message(message))
        return _unwrap(result)

    def get_raw(self, key: str) -> Optional[str]:
        """Get the raw string value, bypassing the schema, defaults and parsing."""
        return self.store.get(key)

    def set(self, key: str, value: Optional[str]) -> None:
        """Set an environment variable. None removes it from the store."""
        if value is None:
            self.store.pop(key, None)
        else:
            self.store[key] = value

    def unset(self, key: str) -> None:
        """Unset an environment variable."""
        self.set(key, None)

    def snapshot(self) -> Dict[str, Any]:
        """Get every variable declared in the schema with its value.

        Raises:
            EnvironmentVariableError: For the first variable that is unavailable
        """
        return {key: _unwrap(self._get_inner(key)) for key in self.config}

    @contextmanager
    def overridden(self, overrides: Mapping[str, Optional[str]]) -> Iterator["Environment"]:
        """Temporarily set variables, restoring the previous raw values on exit.

        A None override unsets the variable for the duration of the block.
        Previous values are restored on every exit path, including errors.
        """
        saved: Dict[str, Optional[str]] = {}
        for key, value in overrides.items():
            saved[key] = self.get_raw(key)
            self.set(key, value)

        self.logger.debug("Applied environment overrides", keys=list(saved))
        try:
            yield self
        except Exception as e:
            self.logger.warning(
                "Restoring environment overrides after error",
                keys=list(saved),
                error=type(e).__name__,
            )
            raise
        finally:
            for key, value in saved.items():
                self.set(key, value)
            self.logger.debug("Restored environment overrides", keys=list(saved))

    def with_vars(
        self,
        overrides: Mapping[str, Optional[str]],
        fn: Callable[..., R],
        *args: Any,
        **kwargs: Any,
    ) -> R:
        """Run ``fn`` with variables overridden, then restore them.

        Args:
            overrides: Variables to set (None unsets) while ``fn`` runs
            fn: The function to run
            *args: Positional arguments for ``fn``
            **kwargs: Keyword arguments for ``fn``

        Returns:
            The return value of ``fn``
        """
        with self.overridden(overrides):
            return fn(*args, **kwargs)

    def _get_inner(self, key: str) -> Result[Any, EnvironmentVariableError]:
        cfg = self.config.get(key)
        if cfg is None:
            return Err(VariableUnknownError(key).with_message(UNKNOWN_VARIABLE_MESSAGE))

        raw = self.store.get(key)
        if raw is None:
            # Defaults are returned as declared, without validation
            if cfg.default is not None:
                self.logger.debug("Using default value", key=key)
                return Ok(cfg.default)

            self.logger.debug("Environment variable not set", key=key)
            return Err(VariableNotFoundError(key, cfg))

        parsed = parse_value(raw, cfg)
        if isinstance(parsed, Err):
            self.logger.debug(
                "Environment variable failed to parse", key=key, reason=parsed.err_value
            )

        return parsed.map_err(
            lambda reason: VariableParseError(key, cfg, raw).with_message(
                f"Error parsing env var {key}: {reason}"
            )
        )


__all__ = ["Environment", "UNKNOWN_VARIABLE_MESSAGE"]
