"""External bundler invocation."""

from .contracts import BundleResult
from .invoker import OUTPUT_FILENAME, BundleInvoker

__all__ = ["BundleResult", "BundleInvoker", "OUTPUT_FILENAME"]
