"""Tests for project file loading."""
import textwrap

import pytest

from tablegen.codegen.core.config import ConfigError, ConfigManager, load_config


def _write(tmp_path, content, name="init.yaml"):
    path = tmp_path / name
    path.write_text(textwrap.dedent(content))
    return path


def test_load_project_file(tmp_path):
    path = _write(tmp_path, """
        output_dir: out
        go:
          cache_ttl: 120
        models:
          - name: user_profile
            comment: user settings
            fields:
              - name: nick_name
                type: string
                tag: '`valid:"Required"`'
        db_config:
          - name: main
            database: app
            username: root
            password: 123456
            host: 10.0.0.1
            port: "3307"
            table: "user, account"
    """)

    config = load_config(path)

    assert config.name == "init"
    assert config.language == "go"
    assert config.output_dir == "out"
    assert config.formatter == ["gofmt", "-w"]
    assert config.generator_options == {"cache_ttl": 120}

    (model,) = config.models
    assert model.name == "user_profile"
    assert model.comment == "user settings"
    assert model.fields[0].tag == '`valid:"Required"`'

    (db,) = config.db_configs
    assert db.password == "123456"
    assert db.port == 3307
    assert db.table == "user, account"
    assert db.alias_name == ""


def test_empty_file(tmp_path):
    config = load_config(_write(tmp_path, ""))

    assert config.models == []
    assert config.db_configs == []


@pytest.mark.parametrize(
    "formatter, expected",
    [("gofmt -l -w", ["gofmt", "-l", "-w"]), ("[goimports, -w]", ["goimports", "-w"]), ("null", [])],
)
def test_formatter_forms(tmp_path, formatter, expected):
    config = load_config(_write(tmp_path, f"formatter: {formatter}\n"))
    assert config.formatter == expected


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_not_yaml(tmp_path):
    with pytest.raises(ConfigError, match="must be YAML"):
        load_config(_write(tmp_path, "models: []\n", name="init.json"))


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write(tmp_path, "models: [unclosed\n"))


def test_top_level_must_be_mapping(tmp_path):
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, "- a\n- b\n"))


def test_bad_port(tmp_path):
    with pytest.raises(ConfigError, match="Invalid port"):
        load_config(_write(tmp_path, "db_config:\n  - name: x\n    port: abc\n"))


def test_unknown_keys_are_reported(tmp_path, caplog):
    load_config(_write(tmp_path, """
        colour: blue
        models:
          - name: user
            size: 3
    """))

    assert "Ignoring unknown configuration key: colour" in caplog.text
    assert "Ignoring unknown model key: size" in caplog.text


def test_validate_warnings():
    manager = ConfigManager()
    config = manager.from_dict(
        {"formatter": None, "db_config": [{"name": "x", "table": " ", "port": 70000}]}
    )

    warnings = manager.validate(config)

    assert any("empty table filter" in w for w in warnings)
    assert any("invalid port 70000" in w for w in warnings)
    assert any("no database name" in w for w in warnings)
    assert any("No formatter" in w for w in warnings)
    assert manager.validate(manager.from_dict({})) == ["Project defines no models and no db_config entries"]


def test_validate_hides_urls():
    manager = ConfigManager()
    config = manager.from_dict(
        {"db_config": [{"url": "mysql+pymysql://root:secret@db/app", "table": ""}]}
    )

    warnings = manager.validate(config)

    assert any("<url>" in w for w in warnings)
    assert not any("secret" in w for w in warnings)
