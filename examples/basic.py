"""Read a small service configuration from the process environment.

Run with, for example:
    APP_MODE=production DEFAULT_TIMEOUT=5 python examples/basic.py
"""

from gofr_env import Environment, duration_from, duration_var, enum_var, get_logger

env = Environment({
    "APP_MODE": enum_var(["development", "production"]),
    "LOG_LEVEL": enum_var(["error", "warn", "info", "debug"], default="info"),
    "DEFAULT_TIMEOUT": duration_var("seconds", default=duration_from(30, "seconds")),
})

logger = get_logger("basic-example")


def main() -> None:
    if env.get("APP_MODE").unwrap_or("development") == "production":
        logger.info("Running in production mode")

    logger.info("Log level configured", log_level=env.get_expect("LOG_LEVEL"))

    timeout = env.get_expect("DEFAULT_TIMEOUT")
    logger.info("Default timeout configured", seconds=timeout.total_seconds())


if __name__ == "__main__":
    main()
