"""Run functions concurrently in queues and child groups, collecting their results."""

__version__ = "0.1.0"
__all__ = ["errors", "exception", "executor", "taskqueue", "parallel", "examples", "demo"]