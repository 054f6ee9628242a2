"""Failures that escape the product layers and reach the failure translator.

Expected conditions (an invalid payload, an unknown product) are never
raised; they travel as values. Anything defined here is an internal failure.
"""


class StockroomError(Exception):
    """Base class for internal failures raised by stockroom code."""


class StoreError(StockroomError):
    """The persistence store could not complete an operation."""


class StoreUnavailableError(StoreError):
    """The persistence store could not be reached."""
