"""
Centralized Logging Utilities and Decorators

Provides reusable logging setup and function decorators for consistent logging
across the podcastr project.

Usage:
    from podcastr.logger import setup_logging, log_function

    # Setup logging for a module
    logger = setup_logging(
        logger_name="pipeline",
        log_file="logs/podcastr.log",
        verbose=True
    )

    # Decorate functions (sync or async) for automatic logging
    @log_function(logger_name="llm", log_execution_time=True)
    async def generate_script(source_text):
        ...
"""

import functools
import inspect
import logging
import time
from pathlib import Path
from typing import Optional, Callable, Any


DEFAULT_LOG_FILE = "logs/podcastr.log"


def setup_logging(
    logger_name: str,
    log_file: str = DEFAULT_LOG_FILE,
    verbose: bool = False,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Set up logging with file and optional console handlers.

    Args:
        logger_name: Name for the logger (e.g., "pipeline")
        log_file: Path to log file (default: "logs/podcastr.log")
        verbose: If True, add console handler with DEBUG level (default: False)
        level: Base logging level (default: logging.INFO)

    Returns:
        Configured logger instance

    Example:
        logger = setup_logging("pipeline", "logs/podcastr.log", verbose=True)
        logger.info("Pipeline started")
    """
    logger = logging.getLogger(logger_name)

    # Avoid adding multiple handlers if already configured
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if verbose else level)

    # Create logs directory if needed
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler for detailed logging
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler for verbose mode
    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter("DEBUG: %(message)s")
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def _resolve_logger(
    logger_name: str, func_name: str, log_file: Optional[str], level: int
) -> logging.Logger:
    if log_file:
        # Setup new logger with custom log file
        return setup_logging(
            logger_name=f"{logger_name}.{func_name}",
            log_file=log_file,
            level=level,
        )
    # Use existing logger; handlers are attached by the entry point
    return logging.getLogger(logger_name)


def _entry_message(func_name: str, log_args: bool, args: tuple, kwargs: dict) -> str:
    log_msg = f"Calling {func_name}"
    if log_args and (args or kwargs):
        args_repr = [repr(a) for a in args]
        kwargs_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
        all_args = ", ".join(args_repr + kwargs_repr)
        log_msg += f" with args: {all_args}"
    return log_msg


def _completion_message(
    func_name: str,
    execution_time: float,
    result: Any,
    log_execution_time: bool,
    log_result: bool,
) -> str:
    completion_msg = f"Completed {func_name}"
    if log_execution_time:
        completion_msg += f" in {execution_time:.2f}s"
    if log_result:
        completion_msg += f" with result: {result!r}"
    return completion_msg


def log_function(
    logger_name: Optional[str] = None,
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    log_args: bool = False,
    log_result: bool = False,
    log_execution_time: bool = True,
) -> Callable:
    """
    Decorator to automatically log function entry, exit, execution time, and exceptions.

    Works for plain functions and for coroutine functions; the coroutine wrapper
    measures the time until the awaited call completes.

    Args:
        logger_name: Custom logger name (if None, uses the decorated function's module name)
        log_file: Optional custom log file path (if None, uses existing logger config)
        level: Log level for entry/exit messages (default: logging.INFO)
        log_args: If True, log function arguments (default: False)
        log_result: If True, log return value (default: False)
        log_execution_time: If True, log execution duration (default: True)

    Returns:
        Decorated function with logging

    Example:
        @log_function(logger_name="storage", log_args=True, log_execution_time=True)
        def build_archive(entries):
            ...
    """

    def decorator(func: Callable) -> Callable:
        name = logger_name or func.__module__
        func_name = func.__name__

        def log_failure(logger: logging.Logger, start_time: float, e: Exception):
            execution_time = time.time() - start_time
            logger.error(
                f"Exception in {func_name} after {execution_time:.2f}s: {type(e).__name__}: {e}",
                exc_info=True,
            )

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs) -> Any:
                logger = _resolve_logger(name, func_name, log_file, level)
                logger.log(level, _entry_message(func_name, log_args, args, kwargs))
                start_time = time.time()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    log_failure(logger, start_time, e)
                    raise
                logger.log(
                    level,
                    _completion_message(
                        func_name,
                        time.time() - start_time,
                        result,
                        log_execution_time,
                        log_result,
                    ),
                )
                return result

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            logger = _resolve_logger(name, func_name, log_file, level)
            logger.log(level, _entry_message(func_name, log_args, args, kwargs))
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log_failure(logger, start_time, e)
                raise
            logger.log(
                level,
                _completion_message(
                    func_name,
                    time.time() - start_time,
                    result,
                    log_execution_time,
                    log_result,
                ),
            )
            return result

        return wrapper

    return decorator


# Convenience decorator for the common case


def log_with_timer(logger_name: Optional[str] = None) -> Callable:
    """
    Simple decorator that logs function entry/exit with execution time.

    Example:
        @log_with_timer("ingestion")
        def fetch_page_text(url):
            ...
    """
    return log_function(
        logger_name=logger_name,
        log_args=False,
        log_result=False,
        log_execution_time=True,
    )
