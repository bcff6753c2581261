# argbind — (c) 2025 argbind contributors — MIT Licensed
"""Global logger instance for argbind."""
import logging

logger: logging.Logger = logging.getLogger("argbind")
