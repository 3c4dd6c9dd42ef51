import pytest

from api_typings.errors import FileConflict
from api_typings.generator.sink import create_file, render_file, write_typings


class TestRenderFile:
    def test_template(self):
        out = render_file("\texport interface A {\n\t}", "1.2")
        assert out == (
            "// Code generated by api-typings. DO NOT EDIT.\n"
            "// api-typings 1.2\n"
            "\n"
            "declare namespace API {\n"
            "\texport interface A {\n\t}\n"
            "}\n"
            "\n"
            "export { API };\n"
        )

    def test_custom_tool(self):
        assert render_file("", "v", tool="goctl").startswith("// Code generated by goctl. DO NOT EDIT.\n// goctl v\n")


class TestWriteTypings:
    def test_creates_parent_dirs(self, tmp_path):
        target = tmp_path / "web" / "src" / "typings.d.ts"
        assert write_typings(target, "content") is True
        assert target.read_text(encoding="utf-8") == "content"

    def test_existing_file_untouched(self, tmp_path):
        target = tmp_path / "typings.d.ts"
        target.write_text("original", encoding="utf-8")
        assert write_typings(target, "new") is False
        assert target.read_text(encoding="utf-8") == "original"

    def test_create_file_raises_conflict(self, tmp_path):
        target = tmp_path / "typings.d.ts"
        create_file(target, "a")
        with pytest.raises(FileConflict) as exc:
            create_file(target, "b")
        assert exc.value.path == target
