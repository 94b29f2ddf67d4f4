"""Common schema module."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Union

from pydantic import PlainSerializer

# Amounts travel as JSON numbers; localized strings such as "1,5" are accepted on input.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
NumberInput = Union[Decimal, str]

