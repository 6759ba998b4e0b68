"""Tests for the Go model generator."""
import pytest

from tablegen.codegen.core.config import ConfigError, FieldConfig, ModelConfig
from tablegen.codegen.core.generator import GeneratorError
from tablegen.codegen.core.normalizer import entity_from_model
from tablegen.codegen.languages.go import GoGenerator, receiver_name
from tablegen.codegen.languages.go.naming import validate_go_package_name
from tablegen.codegen.registry import get_generator, list_supported_languages


def _render(generator, entity):
    return generator.render(entity).decode("utf-8")


def test_user_profile_end_to_end(generator, user_profile):
    """A model with one field renders a complete package."""
    (rendered,) = generator.generate([user_profile])
    assert rendered.path == "models/user_profile/gen_user_profile.go"

    source = rendered.content.decode("utf-8")
    assert source.startswith("// Code generated by tablegen. DO NOT EDIT.\n")
    assert "package userprofile\n" in source
    assert "type UserProfile struct {" in source
    assert '\tNickName string `json:"nick_name" orm:"column(nick_name)"` // nickname of user\n' in source
    assert "// UserProfile user settings\n" in source
    assert 'return models.TableName("user_profile")' in source
    for signature in (
        "func AddUserProfile(u *UserProfile) (int64, error)",
        "func GetUserProfile(id int64) (*UserProfile, error)",
        "func GetUserProfileByWhere(whereCond string, args ...interface{})",
        "func SelectUserProfileByWhere(whereCond string, args ...interface{})",
        "func CountUserProfileByWhere(whereCond string, args ...interface{})",
        "func UpdateUserProfile(updPro *UserProfile) error",
    ):
        assert signature in source
    assert "orm.RegisterModel(new(UserProfile))" in source


def test_column_lists(generator, user_profile):
    source = _render(generator, user_profile)

    assert "SELECT id, `nick_name`, created, updated, deleted FROM" in source
    assert "o.Update(updPro, `nick_name`, `updated`, `deleted`)" in source


def test_entity_without_fields(generator):
    source = _render(generator, entity_from_model(ModelConfig(name="tag")))

    assert "SELECT id, created, updated, deleted FROM" in source
    assert "o.Update(updPro, `updated`, `deleted`)" in source


def test_render_is_deterministic(generator, user_profile):
    assert generator.render(user_profile) == generator.render(user_profile)
    assert GoGenerator().render(user_profile) == generator.render(user_profile)


def test_suppressed_fields_render_in_struct_only(generator):
    entity = entity_from_model(
        ModelConfig(
            name="user",
            fields=[
                FieldConfig(name="_cache", type="string"),
                FieldConfig(name="_raw", type="[]byte", tag='orm:"-"'),
            ],
        )
    )
    source = _render(generator, entity)

    assert "\t_Cache string\n" in source
    assert '\t_Raw []byte `orm:"-"`\n' in source
    assert "SELECT id, created, updated, deleted FROM" in source


def test_receiver_avoids_template_locals(generator):
    source = _render(generator, entity_from_model(ModelConfig(name="order")))

    assert "func AddOrder(order *Order) (int64, error)" in source
    assert "o := orm.NewOrm()" in source


@pytest.mark.parametrize(
    "name, expected",
    [("UserProfile", "u"), ("Type", "t"), ("Order", "order"), ("Object", "object"), ("_Foo", "_Foo")],
)
def test_receiver_name(name, expected):
    assert receiver_name(name) == expected


def test_go_options_reach_the_output(user_profile):
    generator = GoGenerator(
        {"cache_ttl": 300, "models_import": "shop/models", "utils_import": "shop/utils"}
    )
    source = _render(generator, user_profile)

    assert ", u, 300)" in source
    assert 'models "shop/models"' in source
    assert 'utils "shop/utils"' in source


def test_invalid_go_options():
    with pytest.raises(ConfigError):
        GoGenerator({"cache_ttl": "soon"})
    with pytest.raises(ConfigError):
        GoGenerator({"cache_ttl": -1})
    with pytest.raises(ConfigError):
        GoGenerator({"orm_import": ""})


def test_missing_template_value_fails(user_profile):
    generator = GoGenerator()
    generator.template_engine.add_template("model.go.j2", "{{ missing_value }}")

    with pytest.raises(GeneratorError, match="UserProfile"):
        generator.generate([user_profile])


def test_validate_entities(generator):
    entities = [
        entity_from_model(ModelConfig(name="tag")),
        entity_from_model(ModelConfig(name="user", fields=[FieldConfig(name="2fa", type="bool")])),
    ]

    warnings = generator.validate_entities(entities)

    assert any("Tag" in w and "no fields" in w for w in warnings)
    assert any("not a valid Go identifier" in w for w in warnings)


def test_validate_go_package_name():
    assert validate_go_package_name("userprofile") == []
    assert validate_go_package_name("type")
    assert validate_go_package_name("")


def test_registry():
    assert "go" in list_supported_languages()
    assert isinstance(get_generator("golang"), GoGenerator)
