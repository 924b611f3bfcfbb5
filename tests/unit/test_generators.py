"""CUID2 primary keys for API token rows."""

from app.infrastructure.persistence.models.api_token import ApiToken, ApiTokenPermission
from app.shared.utils.generators import generate_cuid


def test_generate_cuid_returns_distinct_strings() -> None:
    ids = {generate_cuid() for _ in range(200)}
    assert len(ids) == 200
    assert all(isinstance(i, str) and i for i in ids)


def test_models_default_to_generated_ids() -> None:
    for model in (ApiToken, ApiTokenPermission):
        default = model.__table__.c.id.default
        assert default is not None
        assert isinstance(default.arg(None), str)
