import pytest

from sqlizer.codegen.core.types import SQL_TYPE_MAP, FieldType, SqlType, map_sql_type
from sqlizer.codegen.languages.go.types import GO_TYPE_MAP, GoTypeMapper
from sqlizer.codegen.core.schema import Attribute


@pytest.mark.parametrize(
    "data_type, expected",
    [
        ("varchar", FieldType.STRING),
        ("nvarchar", FieldType.STRING),
        ("char", FieldType.STRING),
        ("int", FieldType.INTEGER),
        ("float", FieldType.FLOAT),
        ("bit", FieldType.BOOLEAN),
        ("datetime", FieldType.TIMESTAMP),
        ("binary", FieldType.BINARY),
    ],
)
def test_mapped_sql_types(data_type: str, expected: FieldType) -> None:
    assert map_sql_type(data_type) is expected


@pytest.mark.parametrize("data_type", ["xml", "bigint", "datetime2", "uniqueidentifier", "", None])
def test_unmapped_sql_types_return_none(data_type) -> None:
    assert map_sql_type(data_type) is None


def test_lookup_ignores_case_and_padding() -> None:
    assert map_sql_type(" NVARCHAR ") is FieldType.STRING


def test_type_table_is_fixed() -> None:
    assert len(SQL_TYPE_MAP) == len(SqlType) == 8
    with pytest.raises(TypeError):
        SQL_TYPE_MAP[SqlType.INT] = FieldType.STRING


def test_go_types_for_every_field_type() -> None:
    assert {ft: GO_TYPE_MAP[ft].name for ft in FieldType} == {
        FieldType.STRING: "string",
        FieldType.INTEGER: "int64",
        FieldType.FLOAT: "float64",
        FieldType.BOOLEAN: "bool",
        FieldType.TIMESTAMP: "time.Time",
        FieldType.BINARY: "[]byte",
    }


def test_go_imports_only_for_types_in_use() -> None:
    mapper = GoTypeMapper()
    attrs = [
        Attribute("Id", FieldType.INTEGER),
        Attribute("Blob", FieldType.BINARY),
        Attribute("Doc", None, data_type="xml"),
    ]
    assert mapper.get_all_imports(attrs) == []

    attrs.append(Attribute("CreatedAt", FieldType.TIMESTAMP))
    assert mapper.get_all_imports(attrs) == ["time"]
    assert mapper.map_attribute(attrs[2]) is None
