"""Per-category check routines."""

from .choice import check_checkbox, check_radio
from .common import CheckContext
from .hidden import check_hidden
from .media import check_color, check_file
from .numeric import check_number, check_range
from .temporal import check_date, check_datetime_local, check_time
from .text import check_email, check_password, check_search, check_tel, check_text, check_url

__all__ = [
    "CheckContext",
    "check_checkbox",
    "check_color",
    "check_date",
    "check_datetime_local",
    "check_email",
    "check_file",
    "check_hidden",
    "check_number",
    "check_password",
    "check_radio",
    "check_range",
    "check_search",
    "check_tel",
    "check_text",
    "check_time",
    "check_url",
]
