import time
from typing import Any, Dict
import logging

from mojitracker.operations.errors import TrackerFault, TransportFault
from mojitracker.operations.interfaces.operation import Operation


logger = logging.getLogger(__name__)


class OperationExecutor:
    """
    Runs tracker operations with logging and execution metrics.

    Every operation is executed exactly once. Failures are logged and
    re-raised unchanged; retrying against another tracker is left to the
    caller.
    """

    def __init__(self) -> None:
        # Track execution metrics
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._total_execution_time = 0.0

    def execute(self, operation: Operation) -> Operation:
        """
        Execute a single operation.

        Args:
            operation: Operation to execute

        Returns:
            The same operation, now executed, so results can be read from it

        Raises:
            Whatever the operation raises, unchanged
        """
        start_time = time.time()
        self._execution_count += 1
        command_name = operation.get_command_name()

        logger.debug(f"Starting execution of operation '{command_name}'")

        try:
            operation.execute()
        except TransportFault as e:
            self._record_failure(start_time)
            logger.error(f"Operation '{command_name}' could not reach tracker: {e}")
            raise
        except TrackerFault as e:
            self._record_failure(start_time)
            logger.info(f"Operation '{command_name}' rejected by tracker: {e.code}")
            raise
        except Exception as e:
            self._record_failure(start_time)
            logger.error(
                f"Operation '{command_name}' failed: {str(e)}",
                exc_info=True,
            )
            raise

        execution_time = (time.time() - start_time) * 1000  # Convert to ms
        self._success_count += 1
        self._total_execution_time += execution_time

        logger.debug(
            f"Operation '{command_name}' completed successfully in {execution_time:.2f}ms"
        )
        return operation

    def _record_failure(self, start_time: float) -> None:
        self._failure_count += 1
        self._total_execution_time += (time.time() - start_time) * 1000

    def get_execution_metrics(self) -> Dict[str, Any]:
        """
        Get execution metrics for monitoring and debugging.

        Returns:
            Dictionary containing execution statistics
        """
        avg_execution_time = (
            self._total_execution_time / self._execution_count
            if self._execution_count > 0
            else 0
        )

        success_rate = (
            (self._success_count / self._execution_count) * 100
            if self._execution_count > 0
            else 0
        )

        return {
            "total_executions": self._execution_count,
            "successful_executions": self._success_count,
            "failed_executions": self._failure_count,
            "success_rate_percent": round(success_rate, 2),
            "average_execution_time_ms": round(avg_execution_time, 2),
            "total_execution_time_ms": round(self._total_execution_time, 2),
        }

    def reset_metrics(self) -> None:
        """Reset execution metrics (useful for testing)"""
        self._execution_count = 0
        self._success_count = 0
        self._failure_count = 0
        self._total_execution_time = 0.0
        logger.info("Execution metrics reset")
