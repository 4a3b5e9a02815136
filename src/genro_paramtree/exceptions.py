# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamTree exceptions."""

from __future__ import annotations


class ParamTreeError(Exception):
    """Base exception for ParamTree errors."""

    pass


class MissingValueError(ParamTreeError, KeyError):
    """Raised when a path does not resolve to an existing branch."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ''


class ValueExistsError(ParamTreeError, ValueError):
    """Raised when a scalar would overwrite a branch without force."""

    pass


class TypeMismatchError(ParamTreeError, TypeError):
    """Raised when a branch is requested where a scalar is expected."""

    pass


class InvalidSeparatorError(ParamTreeError, TypeError):
    """Raised when a tree is built with an unusable separator."""

    pass
