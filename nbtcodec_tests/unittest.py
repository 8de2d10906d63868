import unittest
from typing import Any, TypeVar
from unittest import main as ut_main

from structlog import get_logger

from nbtcodec.conf.get_settings import get_global_settings
from nbtcodec.nbt_types import make_nbt_type_for_type

logger = get_logger()
main = ut_main

T = TypeVar('T')


class TestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logger.new()
        self._settings = get_global_settings()

    def assertRoundTrip(self, type_: Any, value: T) -> T:
        """ Encode and decode the payload of `value` as `type_` and check that the result is equal to the value."""
        nbt_type = make_nbt_type_for_type(type_)
        data = nbt_type.to_bytes(value)
        result = nbt_type.from_bytes(data)
        self.assertEqual(value, result)
        return result
