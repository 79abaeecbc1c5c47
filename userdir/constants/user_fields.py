"""用户字段约束常量."""

import re

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
DEPARTMENT_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 16

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
# 10-15 位数字,可选前导 "+"
PHONE_PATTERN = re.compile(r"^\+?[0-9]{10,15}$")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 200

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEPARTMENT_MAX_LENGTH",
    "EMAIL_MAX_LENGTH",
    "EMAIL_PATTERN",
    "MAX_PAGE_SIZE",
    "NAME_MAX_LENGTH",
    "PHONE_MAX_LENGTH",
    "PHONE_PATTERN",
]
