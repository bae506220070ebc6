"""Outbound collaborators that action views fire into."""

from .base import Controller
from .request import RequestController, ResponseCallback, SingleRequestController

__all__ = [
    "Controller",
    "RequestController",
    "SingleRequestController",
    "ResponseCallback",
]
