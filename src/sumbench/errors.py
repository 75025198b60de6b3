# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Exception types raised by sumbench."""

from __future__ import annotations

from typing import Iterable


class SumbenchError(Exception):
    """Base class for every error sumbench raises on purpose."""


class ConfigError(SumbenchError, ValueError):
    pass


class DatasetError(SumbenchError, ValueError):
    pass


class NonNumericColumnError(SumbenchError, TypeError):
    def __init__(self, columns: Iterable[str]):
        self.columns = list(columns)
        super().__init__(f"non-numeric columns: {', '.join(self.columns)}")


class UnknownStrategyError(SumbenchError, ValueError):
    pass


class UnknownScopeError(SumbenchError, ValueError):
    pass
