import pytest

from sqlizer.codegen import generate_from_columns
from sqlizer.codegen.core.generator import generate_code
from sqlizer.codegen.core.naming import NameSanitizer
from sqlizer.codegen.core.schema import build_generated_type
from sqlizer.codegen.core.templates import TemplateEngine, TemplateError
from sqlizer.codegen.languages.go.generator import GoGenerator, create_go_generator
from sqlizer.codegen.languages.go.naming import go_package_name, go_tag_name, validate_go_package_name
from sqlizer.database.models import ColumnMetadata

from tests.conftest import column_row


def test_users_struct_fields_in_order(users_columns) -> None:
    result = generate_from_columns("Users", users_columns)
    code = result.code

    assert "package users\n" in code
    assert "type Users struct {" in code
    lines = [
        '\tId int64 `json:"id"`',
        '\tName string `json:"name"`',
        '\tCreatedAt time.Time `json:"createdat"`',
    ]
    positions = [code.index(line) for line in lines]
    assert positions == sorted(positions)
    assert code.count("`json:") == 3
    assert result.warnings == []


def test_time_import_only_when_needed(users_columns) -> None:
    code = generate_from_columns("Users", users_columns).code
    assert 'import (\n\t"time"\n)' in code

    no_time = [c for c in users_columns if c.data_type != "datetime"]
    assert "import" not in generate_from_columns("Users", no_time).code


def test_unmapped_column_renders_placeholder() -> None:
    columns = [
        ColumnMetadata.from_row(column_row("Id", "int", 1)),
        ColumnMetadata.from_row(column_row("Payload", "xml", 2)),
    ]

    result = generate_from_columns("Users", columns)

    assert '\tPayload interface{} `json:"payload"` // unmapped SQL type: xml' in result.code
    assert result.metadata["has_unmapped"] is True
    assert any("Payload" in warning for warning in result.warnings)


def test_header_and_doc_comment(users_columns) -> None:
    code = generate_from_columns("Users", users_columns).code

    assert code.startswith("// Code generated by sqlizer from table Users. DO NOT EDIT.\n")
    assert "// Users mirrors the columns of the Users table.\ntype Users struct {" in code
    assert code.endswith("}\n")


def test_comments_can_be_disabled(users_columns) -> None:
    code = generate_from_columns("Users", users_columns, {"add_comments": False}).code
    assert "mirrors the columns" not in code


def test_package_name_override(users_columns) -> None:
    code = generate_from_columns("Users", users_columns, {"package_name": "models"}).code
    assert "package models\n" in code


def test_awkward_names_become_go_identifiers() -> None:
    columns = [
        ColumnMetadata.from_row(column_row("first name", "varchar", 1, table="user_accounts")),
        ColumnMetadata.from_row(column_row("2fa_enabled", "bit", 2, table="user_accounts")),
        ColumnMetadata.from_row(column_row("UserID", "int", 3, table="user_accounts")),
        ColumnMetadata.from_row(column_row("user_id", "int", 4, table="user_accounts")),
    ]

    code = generate_from_columns("user_accounts", columns).code

    assert "package useraccounts\n" in code
    assert "type UserAccounts struct {" in code
    assert '\tFirstName string `json:"first name"`' in code
    assert '\tN2faEnabled bool `json:"2fa_enabled"`' in code
    assert '\tUserID int64 `json:"userid"`' in code
    assert '\tUserId int64 `json:"user_id"`' in code


def test_duplicate_field_names_get_suffix() -> None:
    columns = [
        ColumnMetadata.from_row(column_row("user name", "varchar", 1)),
        ColumnMetadata.from_row(column_row("user_name", "varchar", 2)),
    ]
    code = generate_from_columns("Users", columns).code

    assert "\tUserName string" in code
    assert "\tUserName2 string" in code


def test_generator_is_reusable(users_columns) -> None:
    generator = create_go_generator()
    generated = build_generated_type("Users", users_columns)

    first = generate_code(generator, generated).code
    second = generate_code(generator, generated).code
    assert first == second


def test_empty_table_warns(users_columns) -> None:
    result = generate_code(GoGenerator(), build_generated_type("Users", []))
    assert "type Users struct {\n}" in result.code
    assert result.warnings == ["Table 'Users' has no columns"]


def test_missing_template_raises_template_error(users_columns, tmp_path) -> None:
    class BrokenGenerator(GoGenerator):
        def get_template_directory(self):
            return tmp_path

    with pytest.raises(TemplateError):
        BrokenGenerator().generate(build_generated_type("Users", users_columns))


def test_bad_template_syntax_raises_template_error(tmp_path) -> None:
    (tmp_path / "broken.j2").write_text("{% for x in %}")
    engine = TemplateEngine(tmp_path)
    with pytest.raises(TemplateError):
        engine.render_template("broken.j2", {})


def test_template_comment_filter(tmp_path) -> None:
    (tmp_path / "doc.j2").write_text("{{ text | comment }}")
    engine = TemplateEngine(tmp_path)
    assert engine.render_template("doc.j2", {"text": "a\nb"}) == "// a\n// b"


def test_missing_template_directory_raises_template_error(tmp_path) -> None:
    with pytest.raises(TemplateError, match="not found"):
        TemplateEngine(tmp_path / "nope")


def test_sanitizer_names() -> None:
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("created_at") == "CreatedAt"
    assert sanitizer.sanitize_name("user name") == "UserName"
    assert sanitizer.sanitize_name("HTTPStatus") == "HTTPStatus"
    assert sanitizer.sanitize_name("Order-Items") == "OrderItems"
    assert sanitizer.sanitize_name("!!!") == "Field"
    assert sanitizer.sanitize_name("created_at") == "CreatedAt"
    assert sanitizer.sanitize_name("CreatedAt") == "CreatedAt2"


def test_go_package_names() -> None:
    assert go_package_name("Users") == "users"
    assert go_package_name("User_Accounts") == "useraccounts"
    assert go_package_name("2020Sales") == "p2020sales"
    assert go_package_name("Type") == "typepkg"
    assert validate_go_package_name("users") == []
    assert validate_go_package_name("Bad_Name")


def test_tag_drops_characters_go_cannot_hold() -> None:
    columns = [
        ColumnMetadata.from_row(column_row("We`ird", "int", 1)),
        ColumnMetadata.from_row(column_row('Say"Hi', "varchar", 2)),
        ColumnMetadata.from_row(column_row("Back\\Slash", "bit", 3)),
    ]

    result = generate_from_columns("Odd", columns)

    assert '\tWeIrd int64 `json:"weird"`' in result.code
    assert '\tSayHi string `json:"sayhi"`' in result.code
    assert '\tBackSlash bool `json:"backslash"`' in result.code
    assert len([w for w in result.warnings if "struct tag" in w]) == 3
    assert "Column Odd.We`ird uses characters not allowed in a struct tag; json name is 'weird'" in result.warnings


def test_go_tag_names() -> None:
    assert go_tag_name("createdat") == "createdat"
    assert go_tag_name("a`b\"c\\d\ne") == "abcde"
