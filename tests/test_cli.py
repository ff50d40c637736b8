"""
Tests for the modelgen command line interface.
"""
import json

import pytest
from typer.testing import CliRunner

from modelgen.cli import app

runner = CliRunner()


@pytest.fixture
def description_file(tmp_path, description_payload):
    path = tmp_path / "user.json"
    path.write_text(json.dumps(description_payload), encoding="utf-8")
    return path


def test_new_writes_starter_description(tmp_path):
    path = tmp_path / "models" / "post.json"
    result = runner.invoke(app, ["model", "new", str(path), "--model-name", "Post", "--table-name", "posts"])
    assert result.exit_code == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["modelName"] == "Post"
    assert data["tableName"] == "posts"
    assert data["useTimestamps"] is True
    assert data["fields"] == [
        {"name": "", "type": "", "required": False, "unique": False, "defaultValue": ""}
    ]


def test_new_commonjs_without_timestamps(tmp_path):
    path = tmp_path / "post.json"
    result = runner.invoke(app, ["model", "new", str(path), "--module-style", "commonjs", "--no-timestamps"])
    assert result.exit_code == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["moduleStyle"] == "commonjs"
    assert data["useTimestamps"] is False


def test_new_refuses_to_overwrite(description_file):
    original = description_file.read_text(encoding="utf-8")
    result = runner.invoke(app, ["model", "new", str(description_file)])
    assert result.exit_code == 1
    assert description_file.read_text(encoding="utf-8") == original

    result = runner.invoke(app, ["model", "new", str(description_file), "--force"])
    assert result.exit_code == 0
    assert description_file.read_text(encoding="utf-8") != original


def test_generate_plain_mysql(description_file):
    result = runner.invoke(app, ["model", "generate", str(description_file), "--target", "mysql", "--plain"])
    assert result.exit_code == 0
    assert (
        "CREATE TABLE `users` (\n"
        "  `age` INT NOT NULL,\n"
        "  `status` VARCHAR(255) DEFAULT 'active',\n"
        "  `createdAt` TIMESTAMP DEFAULT CURRENT_TIMESTAMP,\n"
        "  `updatedAt` TIMESTAMP DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP\n"
        ");"
    ) in result.stdout


def test_generate_plain_all(description_file):
    result = runner.invoke(app, ["model", "generate", str(description_file), "--plain"])
    assert result.exit_code == 0
    assert "sequelize.define('User'" in result.stdout
    assert "mongoose.model('User', UserSchema);" in result.stdout
    assert "CREATE TABLE `users`" in result.stdout


def test_generate_rich_output(description_file):
    result = runner.invoke(app, ["model", "generate", str(description_file), "--target", "sequelize"])
    assert result.exit_code == 0
    assert "Sequelize Model" in result.stdout


def test_generate_to_output_dir(description_file, tmp_path):
    out = tmp_path / "generated"
    result = runner.invoke(app, ["model", "generate", str(description_file), "--output-dir", str(out)])
    assert result.exit_code == 0
    assert sorted(p.name for p in out.iterdir()) == ["User.mongoose.js", "User.sequelize.js", "users.sql"]
    assert (out / "users.sql").read_text(encoding="utf-8").endswith(");\n")


def test_generate_warns_about_untyped_fields(tmp_path):
    path = tmp_path / "draft.json"
    path.write_text(json.dumps({"modelName": "Draft", "tableName": "drafts", "fields": [{"name": "title"}]}))
    result = runner.invoke(app, ["model", "generate", str(path), "--target", "mysql", "--plain"])
    assert result.exit_code == 0
    assert "has no type" in result.output
    assert "`title` VARCHAR(255)" in result.output


def test_generate_missing_file(tmp_path):
    result = runner.invoke(app, ["model", "generate", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_generate_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    result = runner.invoke(app, ["model", "generate", str(path)])
    assert result.exit_code == 1


def test_types_table():
    result = runner.invoke(app, ["model", "types"])
    assert result.exit_code == 0
    assert "DECIMAL(10,2)" in result.stdout
    assert "TINYINT(1)" in result.stdout


def test_server_status():
    result = runner.invoke(app, ["server", "status"])
    assert result.exit_code == 0
    assert "/api" in result.stdout
