"""Domain services - pure geometry algorithms."""

from .intercept import time_intercept

__all__ = ['time_intercept']
