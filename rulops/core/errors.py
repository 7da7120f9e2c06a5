"""Exceptions raised by the prognostics engine."""


class RULOpsError(Exception):
    """Base class for all rulops errors."""


class NumericalSingularity(RULOpsError):
    """
    The normal-equations matrix of a polynomial fit is singular even after
    partial pivoting, so no unique set of coefficients exists.
    """

    def __init__(self, message: str, pivot_index: int = -1) -> None:
        super().__init__(message)
        self.pivot_index = pivot_index
