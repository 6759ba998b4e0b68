"""Shared fixtures."""
import pytest

from tablegen.codegen.core.config import FieldConfig, ModelConfig
from tablegen.codegen.core.normalizer import entity_from_model
from tablegen.codegen.languages.go import GoGenerator


@pytest.fixture
def user_profile_model():
    return ModelConfig(
        name="user_profile",
        fields=[FieldConfig(name="nick_name", type="string", comment="nickname of user")],
        comment="user settings",
    )


@pytest.fixture
def user_profile(user_profile_model):
    return entity_from_model(user_profile_model)


@pytest.fixture
def generator():
    return GoGenerator()
