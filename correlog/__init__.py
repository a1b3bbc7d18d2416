"""
correlog - correlation-aware trace logging.

Leveled trace events tagged with a hierarchical activity identity, so that
log lines produced during a nested unit of work can be correlated back to
their enclosing operations.

Usage:
    from correlog.bootstrap import get_logger

    log = get_logger("billing")
    with log.start_new_activity("Invoice {0}", invoice_id):
        log.log_info("computing totals")
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
