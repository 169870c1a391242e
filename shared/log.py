"""
Component logging helpers.

Every module logs through a small set of level functions bound to a component
name, so call sites stay one-liners and the prefix format lives in one place.

Usage:
    from shared.log import create_logger
    log_trace, log_debug, log_info, log_warn, log_error = create_logger("Engine")
    log_info("Listed 42 records")  # -> [versiondiff Engine] Listed 42 records
"""

import logging

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def create_logger(component: str = ""):
    """Create log functions for a component.

    Args:
        component: Component name suffix. If provided, prefix becomes
                   "[versiondiff {component}]" and the backing logger is
                   "versiondiff.{component}", otherwise "[versiondiff]" and
                   "versiondiff".

    Returns:
        Tuple of (log_trace, log_debug, log_info, log_warn, log_error) functions.
    """
    prefix = f"[versiondiff {component}]" if component else "[versiondiff]"
    name = f"versiondiff.{component.lower().replace(' ', '_')}" if component else "versiondiff"
    logger = logging.getLogger(name)

    def log_trace(msg): logger.log(TRACE, f"{prefix} {msg}")
    def log_debug(msg): logger.debug(f"{prefix} {msg}")
    def log_info(msg): logger.info(f"{prefix} {msg}")
    def log_warn(msg): logger.warning(f"{prefix} {msg}")
    def log_error(msg): logger.error(f"{prefix} {msg}")

    return log_trace, log_debug, log_info, log_warn, log_error
