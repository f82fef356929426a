"""Hotel operations verification model: bounds, sampling, M/M/c stages, guest ledger, profit"""
import logging

from .errors import ModelConfigError, UnstableQueueError
from .models import Config
from .compute import compute

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["Config", "compute", "ModelConfigError", "UnstableQueueError"]
