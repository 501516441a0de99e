from __future__ import annotations

from typing import Iterable

from fastapi import HTTPException, status


class OrderByError(Exception):
    pass


class InvalidSortFieldError(OrderByError, HTTPException):
    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        HTTPException.__init__(
            self,
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid sort fields: {', '.join(self.fields)}",
        )
