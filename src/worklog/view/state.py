# SPDX-License-Identifier: MIT

"""Display state shared by the terminal views."""

from contextvars import ContextVar

# Controls header visibility in reports, default is to show headers
_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()
