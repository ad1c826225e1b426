"""
Logging System for Expression Ranking

This module provides a centralized logging system with different verbosity levels.
Log records go to stderr so that stdout stays reserved for ranked result lines.
"""

import logging
import sys
from typing import Optional, Dict, Any, List
from enum import Enum
import time
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the ranking pipeline"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only final results and critical info
    MODERATE = 2    # Stage milestones
    DETAILED = 3    # Per-run summaries
    VERBOSE = 4     # All information including per-expression debug details


class RankingLogger:
    """
    Centralized logger for the build/score/rank pipeline
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()

        self.logger = logging.getLogger('expression_ranking')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_ranking_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def is_enabled(self, required_level: LogLevel) -> bool:
        """Check if messages at this level would be logged"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Critical errors and failures, suppressed only in silent mode"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def milestone(self, message: str):
        """Pipeline stage transitions"""
        if self.is_enabled(LogLevel.MODERATE):
            elapsed = time.time() - self.start_time
            self.logger.info(f"MILESTONE: {message} ({elapsed:.2f}s)")

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self.is_enabled(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log a run summary"""
        if not self.is_enabled(LogLevel.DETAILED):
            return

        self.logger.info("=" * 60)
        self.logger.info("EXPRESSION RANKING RESULTS:")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")

    def ranking_summary(self, detailed: List[Dict[str, Any]], top_n: int = 5):
        """Log the best ranked expressions"""
        if not self.is_enabled(LogLevel.DETAILED):
            return

        self.logger.info(f"Top {min(top_n, len(detailed))} of {len(detailed)} expressions:")
        for info in detailed[:top_n]:
            self.logger.info(f"  {info['rank']}. {info['expression']} "
                             f"score={info['score']} size={info['size']} depth={info['depth']}")


# Global logger instance
_global_logger: Optional[RankingLogger] = None


def get_logger() -> RankingLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = RankingLogger()
    return _global_logger


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> RankingLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = RankingLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_milestone(message: str):
    """Log milestone message"""
    get_logger().milestone(message)


def log_critical(message: str):
    """Log critical message"""
    get_logger().critical(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
