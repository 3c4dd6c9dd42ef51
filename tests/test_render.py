import io

import pytest

from api_typings.errors import CyclicType, UnsupportedType
from api_typings.generator.render import format_comment, member_type, render_type, title, write_member
from api_typings.parser.base import (
    ArrayType,
    DefineStruct,
    InterfaceType,
    MapType,
    Member,
    NestedStruct,
    PointerType,
    PrimitiveType,
)

INT = PrimitiveType(name="int")
STRING = PrimitiveType(name="string")


class TestRenderType:
    def test_primitive(self):
        assert render_type(PrimitiveType(name="uint64"), "T") == "string"

    def test_struct_reference_capitalized(self):
        assert render_type(DefineStruct(name="user"), "T") == "User"

    def test_array(self):
        assert render_type(ArrayType(value=STRING), "T") == "Array<string>"

    def test_byte_array_is_blob(self):
        assert render_type(ArrayType(value=PrimitiveType(name="byte")), "T") == "Blob"
        assert render_type(ArrayType(value=PrimitiveType(name="uint8")), "T") == "Blob"

    def test_array_of_byte_arrays(self):
        tp = ArrayType(value=ArrayType(value=PrimitiveType(name="byte")))
        assert render_type(tp, "T") == "Array<Blob>"

    def test_map_key_always_string(self):
        tp = MapType(key=INT, value=ArrayType(value=DefineStruct(name="Item")))
        assert render_type(tp, "T") == "{ [key: string]: Array<Item> }"

    def test_pointer_transparent(self):
        assert render_type(PointerType(type=PointerType(type=INT)), "T") == "number"
        assert render_type(ArrayType(value=PointerType(type=DefineStruct(name="Pet"))), "T") == "Array<Pet>"

    def test_interface(self):
        assert render_type(InterfaceType(), "T") == "any"

    def test_nested_struct_indentation(self):
        nested = NestedStruct(members=[
            Member(name="a", type=INT),
            Member(name="b", type=NestedStruct(members=[Member(name="c", type=STRING)])),
        ])
        assert render_type(nested, "T", 1) == "{\n\t\ta?: number\n\t\tb?: {\n\t\t\tc?: string\n\t\t}\n\t}"

    def test_array_of_nested_struct(self):
        tp = ArrayType(value=NestedStruct(members=[Member(name="x", type=INT)]))
        assert render_type(tp, "T", 0) == "Array<{\n\tx?: number\n}>"

    def test_unsupported_primitive_names_owner(self):
        with pytest.raises(UnsupportedType, match="type complex64 not supported in Order"):
            render_type(ArrayType(value=PrimitiveType(name="complex64")), "Order")

    def test_nested_struct_inlining_enclosing_struct(self):
        outer = DefineStruct(name="Outer")
        nested = NestedStruct(members=[Member(name="Outer", type=PointerType(type=outer), inline=True)])
        outer.members = [Member(name="n", type=nested)]
        with pytest.raises(CyclicType, match=r"Outer -> struct\{\.\.\.\} -> Outer"):
            render_type(MapType(key=STRING, value=nested), "Outer", 1, (outer,))

    def test_unknown_shape(self):
        with pytest.raises(UnsupportedType, match="not supported in T"):
            render_type("chan int", "T")


class TestMemberType:
    def test_string_enum(self):
        m = Member(name="status", type=STRING, options=["A", "B"])
        assert member_type(m, "T", 1) == "'A' | 'B'"

    def test_number_enum(self):
        m = Member(name="level", type=PointerType(type=INT), options=["1", "2"])
        assert member_type(m, "T", 1) == "1 | 2"

    def test_int64_enum_quoted(self):
        m = Member(name="id", type=PrimitiveType(name="int64"), options=["1", "2"])
        assert member_type(m, "T", 1) == "'1' | '2'"

    def test_enum_ignored_on_nested_struct(self):
        m = Member(name="n", type=NestedStruct(members=[Member(name="x", type=INT)]), options=["a"])
        assert member_type(m, "T", 0) == "{\n\tx?: number\n}"

    def test_enum_not_applied_inside_nested(self):
        inner = Member(name="x", type=STRING, options=["a"])
        m = Member(name="n", type=NestedStruct(members=[inner]))
        assert member_type(m, "T", 0) == "{\n\tx?: 'a'\n}"


class TestWriteMember:
    def test_optional_with_comment_and_docs(self):
        writer = io.StringIO()
        m = Member(name="id", type=PrimitiveType(name="int64"), docs=["// identifier"], comment="//  primary key ")
        write_member(writer, m, "T", 2)
        assert writer.getvalue() == "\t\t// identifier\n\t\tid?: string // primary key\n"

    def test_no_comment(self):
        writer = io.StringIO()
        write_member(writer, Member(name="ok", type=PrimitiveType(name="bool")), "T", 0)
        assert writer.getvalue() == "ok?: boolean\n"


class TestHelpers:
    def test_title(self):
        assert title("user") == "User"
        assert title("listReq") == "ListReq"
        assert title("") == ""

    @pytest.mark.parametrize("comment,expected", [
        ("// hello", " // hello"),
        ("hello  ", " // hello"),
        ("", ""),
        ("//", ""),
    ])
    def test_format_comment(self, comment, expected):
        assert format_comment(comment) == expected
