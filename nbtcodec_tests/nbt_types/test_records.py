from dataclasses import dataclass, field
from typing import Optional

from nbtcodec import nbt_field
from nbtcodec.exception import TypeMismatchError, UnknownFieldError, UnsupportedTypeError
from nbtcodec.fields import get_record_fields
from nbtcodec.nbt_types import ByteArrayNBTType, ListNBTType, RecordNBTType, make_nbt_type_for_type
from nbtcodec.types import Byte, Int, Short
from nbtcodec_tests import unittest


@dataclass
class Item:
    item_id: str = nbt_field(name='id')
    count: Byte = Byte(1)
    damage: Short = nbt_field(default=Short(0), name='Damage')


@dataclass
class Inventory:
    items: list[Item] = field(default_factory=list)
    slots: list[Byte] = field(default_factory=list)
    slots_as_list: list[Byte] = nbt_field(default_factory=list, as_list=True)
    selected: Optional[Int] = None


@dataclass
class Entity:
    name: str
    has_custom_name: bool = False
    custom_name: str = nbt_field(default='', present_if='has_custom_name')
    cache: dict = nbt_field(default_factory=dict, skip=True)


@dataclass
class Node:
    name: str
    children: list['Node'] = field(default_factory=list)


@dataclass(frozen=True)
class Frozen:
    x: Int
    y: Int = nbt_field(default=Int(0), init=False)


@dataclass
class DuplicateNames:
    a: Int
    b: Int = nbt_field(name='a')


@dataclass
class MissingGate:
    value: Int = nbt_field(present_if='flag')


@dataclass
class NotBoolGate:
    flag: Int
    value: Int = nbt_field(present_if='flag')


@dataclass
class UnresolvableAnnotation:
    value: 'DoesNotExist'  # type: ignore[name-defined]  # noqa: F821


class RecordFieldsTestCase(unittest.TestCase):
    def test_wire_names(self) -> None:
        record_fields = get_record_fields(Item)
        self.assertEqual(list(record_fields.by_wire_name), ['id', 'count', 'Damage'])
        self.assertEqual([f.attr_name for f in record_fields.fields], ['item_id', 'count', 'damage'])

    def test_skip(self) -> None:
        record_fields = get_record_fields(Entity)
        self.assertNotIn('cache', record_fields.by_wire_name)
        self.assertIsNone(record_fields.fields[-1].nbt_type)

    def test_as_list(self) -> None:
        by_wire_name = get_record_fields(Inventory).by_wire_name
        self.assertIsInstance(by_wire_name['slots'].nbt_type, ByteArrayNBTType)
        self.assertIsInstance(by_wire_name['slots_as_list'].nbt_type, ListNBTType)

    def test_optional(self) -> None:
        selected = get_record_fields(Inventory).by_wire_name['selected']
        self.assertTrue(selected.optional)
        self.assertFalse(get_record_fields(Item).by_wire_name['id'].optional)

    def test_cached(self) -> None:
        self.assertIs(get_record_fields(Item), get_record_fields(Item))

    def test_invalid_records(self) -> None:
        with self.assertRaises(UnsupportedTypeError):
            get_record_fields(DuplicateNames)
        with self.assertRaises(UnsupportedTypeError):
            get_record_fields(MissingGate)
        with self.assertRaises(UnsupportedTypeError):
            get_record_fields(NotBoolGate)
        with self.assertRaises(UnsupportedTypeError):
            get_record_fields(UnresolvableAnnotation)
        with self.assertRaises(UnsupportedTypeError):
            get_record_fields(int)

    def test_invalid_record_is_lazy(self) -> None:
        # the record type can be built, the error only shows up when the fields are needed
        nbt_type = make_nbt_type_for_type(DuplicateNames)
        self.assertIsInstance(nbt_type, RecordNBTType)
        with self.assertRaises(UnsupportedTypeError):
            nbt_type.to_bytes(DuplicateNames(Int(1), Int(2)))


class RecordNBTTypeTestCase(unittest.TestCase):
    def test_round_trip(self) -> None:
        self.assertRoundTrip(Item, Item('stone', Byte(64), Short(3)))
        self.assertRoundTrip(Inventory, Inventory(
            items=[Item('stone'), Item('dirt', Byte(2))],
            slots=[Byte(0), Byte(1)],
            slots_as_list=[Byte(2)],
            selected=Int(1),
        ))
        self.assertRoundTrip(Inventory, Inventory())

    def test_self_reference(self) -> None:
        tree = Node('root', [Node('a'), Node('b', [Node('c')])])
        self.assertRoundTrip(Node, tree)

    def test_present_if(self) -> None:
        nbt_type = make_nbt_type_for_type(Entity)
        without_name = nbt_type.to_bytes(Entity('zombie', custom_name='ignored'))
        self.assertNotIn(b'\x00\x0bcustom_name', without_name)
        self.assertEqual(nbt_type.from_bytes(without_name), Entity('zombie'))

        self.assertRoundTrip(Entity, Entity('zombie', True, 'Bob'))

    def test_skip_is_not_written(self) -> None:
        data = make_nbt_type_for_type(Entity).to_bytes(Entity('zombie', cache={'a': 1}))
        self.assertNotIn(b'cache', data)
        self.assertEqual(make_nbt_type_for_type(Entity).from_bytes(data).cache, {})

    def test_optional_none_is_not_written(self) -> None:
        data = make_nbt_type_for_type(Inventory).to_bytes(Inventory())
        self.assertNotIn(b'selected', data)
        self.assertIsNone(make_nbt_type_for_type(Inventory).from_bytes(data).selected)

    def test_missing_fields(self) -> None:
        # an empty compound
        result = make_nbt_type_for_type(Node).from_bytes(b'\x00')
        self.assertEqual(result, Node(''))

    def test_unknown_field(self) -> None:
        data = make_nbt_type_for_type(dict).to_bytes({'id': 'stone', 'Count': Byte(1)})
        with self.assertRaises(UnknownFieldError) as cm:
            make_nbt_type_for_type(Item).from_bytes(data)
        self.assertEqual(cm.exception.name, 'Count')
        self.assertIs(cm.exception.record, Item)

    def test_skipped_field_is_not_read(self) -> None:
        data = make_nbt_type_for_type(dict).to_bytes({'name': 'zombie', 'cache': {}})
        with self.assertRaises(UnknownFieldError):
            make_nbt_type_for_type(Entity).from_bytes(data)

    def test_field_type_mismatch(self) -> None:
        data = make_nbt_type_for_type(dict).to_bytes({'id': Int(1)})
        with self.assertRaises(TypeMismatchError):
            make_nbt_type_for_type(Item).from_bytes(data)

    def test_not_init_field(self) -> None:
        value = Frozen(Int(1))
        object.__setattr__(value, 'y', Int(2))
        result = self.assertRoundTrip(Frozen, value)
        self.assertEqual(result.y, 2)

    def test_check_value(self) -> None:
        nbt_type = make_nbt_type_for_type(Item)
        nbt_type.check_value(Item('stone'))
        with self.assertRaises(TypeMismatchError):
            nbt_type.check_value(Node('stone'))
        with self.assertRaises(TypeMismatchError):
            nbt_type.check_value(Item(1))  # type: ignore[arg-type]
