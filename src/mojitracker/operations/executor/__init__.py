"""
Operation execution with logging and metrics.
"""

from .operation_executor import OperationExecutor

__all__ = ["OperationExecutor"]
