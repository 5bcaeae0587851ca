"""Tests for the provider lifecycle service."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from localpros.core.exceptions import BadRequest, NotFound, Unavailable
from localpros.db.models.user import User
from localpros.services import providers as provider_service


@pytest.fixture
def make_user(db_session):
    def _make_user(open_id):
        user = User(open_id=open_id, role="user")
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def create(db_session, seed):
    """Create a listing for a user with valid references and a silent notifier."""

    def _create(user, **overrides):
        values = {
            "name": "Jo Silva",
            "phone": "93999999999",
            "category_id": seed["category_id"],
            "neighborhood_id": seed["neighborhood_id"],
            "notifier": Mock(),
        }
        values.update(overrides)
        return provider_service.create_provider(db_session, user.id, **values)[0]

    return _create


def test_new_provider_starts_pending_active_not_featured(make_user, create):
    provider = create(make_user("a"))
    assert provider.status == "pending"
    assert provider.is_active is True
    assert provider.is_featured is False
    assert provider.approved_at is None


def test_creation_notifies_admins(make_user, create):
    notifier = Mock()
    create(make_user("a"), name="Maria Luz", notifier=notifier)
    notifier.assert_called_once()
    title, content = notifier.call_args.args
    assert title == "New provider awaiting approval"
    assert "Maria Luz" in content and "Eletricista" in content


def test_failing_notifier_does_not_fail_creation(db_session, make_user, create):
    user = make_user("a")
    provider = create(user, notifier=Mock(side_effect=RuntimeError("sink down")))
    assert provider.id is not None
    assert provider_service.get_owned_provider(db_session, user.id).id == provider.id


def test_second_listing_for_same_owner_is_rejected(make_user, create):
    owner = make_user("a")
    create(make_user("b"))
    create(owner)
    with pytest.raises(BadRequest, match="already exists"):
        create(owner)


def test_existing_listing_is_checked_before_references(make_user, create):
    owner = make_user("a")
    create(owner)
    with pytest.raises(BadRequest, match="already exists"):
        create(owner, category_id=999, neighborhood_id=999)


def test_unknown_category_is_rejected_before_neighborhood(make_user, create):
    with pytest.raises(BadRequest, match="Invalid category"):
        create(make_user("a"), category_id=999, neighborhood_id=999)


def test_unknown_neighborhood_is_rejected(make_user, create):
    with pytest.raises(BadRequest, match="Invalid neighborhood"):
        create(make_user("a"), neighborhood_id=999)


def test_create_without_storage_is_unavailable():
    with pytest.raises(Unavailable):
        provider_service.create_provider(None, 1, "Jo Silva", "93999999999", 1, 1, notifier=Mock())


def test_approve_sets_status_and_latest_timestamp(db_session, make_user, create, monkeypatch):
    times = iter([datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc), datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc)])

    class FrozenDatetime:
        @staticmethod
        def now(tz=None):
            return next(times)

    monkeypatch.setattr(provider_service, "datetime", FrozenDatetime)
    provider = create(make_user("a"))

    first = provider_service.approve_provider(db_session, provider.id)
    assert first.status == "approved"
    assert first.approved_at.replace(tzinfo=None) == datetime(2024, 1, 1, 9, 0)

    second = provider_service.approve_provider(db_session, provider.id)
    assert second.status == "approved"
    assert second.approved_at.replace(tzinfo=None) == datetime(2024, 1, 2, 9, 0)


def test_reject_records_reason(db_session, make_user, create):
    provider = create(make_user("a"))
    rejected = provider_service.reject_provider(db_session, provider.id, "Phone number does not answer")
    assert rejected.status == "rejected"
    assert rejected.rejection_reason == "Phone number does not answer"
    assert rejected.approved_at is None


def test_decided_statuses_are_terminal(db_session, make_user, create):
    approved = create(make_user("a"))
    provider_service.approve_provider(db_session, approved.id)
    with pytest.raises(BadRequest):
        provider_service.reject_provider(db_session, approved.id, "too late")

    rejected = create(make_user("b"))
    provider_service.reject_provider(db_session, rejected.id, "incomplete")
    with pytest.raises(BadRequest):
        provider_service.approve_provider(db_session, rejected.id)
    assert provider_service.get_provider(db_session, rejected.id).status == "rejected"


@pytest.mark.parametrize("operation", ["approve_provider", "toggle_featured"])
def test_admin_operations_on_unknown_provider(db_session, seed, operation):
    with pytest.raises(NotFound):
        getattr(provider_service, operation)(db_session, 12345)


def test_update_patches_only_listing_fields(db_session, seed, make_user, create):
    owner = make_user("a")
    create(owner, description="Old bio")
    updated = provider_service.update_provider(
        db_session,
        owner.id,
        {
            "name": "Jo Silva Reparos",
            "description": None,
            "category_id": seed["other_category_id"],
            "status": "approved",
            "is_featured": True,
        },
    )[0]
    assert updated.name == "Jo Silva Reparos"
    assert updated.description is None
    assert updated.category_id == seed["other_category_id"]
    assert updated.status == "pending"
    assert updated.is_featured is False


def test_update_ignores_null_for_required_fields(db_session, make_user, create):
    owner = make_user("a")
    create(owner)
    updated = provider_service.update_provider(db_session, owner.id, {"name": None, "phone": None})[0]
    assert updated.name == "Jo Silva"
    assert updated.phone == "93999999999"


def test_update_validates_new_references(db_session, make_user, create):
    owner = make_user("a")
    create(owner)
    with pytest.raises(BadRequest, match="Invalid neighborhood"):
        provider_service.update_provider(db_session, owner.id, {"neighborhood_id": 999})


def test_update_without_listing_is_not_found(db_session, seed, make_user):
    with pytest.raises(NotFound):
        provider_service.update_provider(db_session, make_user("a").id, {"name": "Nobody"})


def test_toggles_flip_back_and_forth(db_session, make_user, create):
    owner = make_user("a")
    provider = create(owner)

    assert provider_service.toggle_active(db_session, owner.id)[0].is_active is False
    assert provider_service.toggle_active(db_session, owner.id)[0].is_active is True

    assert provider_service.toggle_featured(db_session, provider.id).is_featured is True
    assert provider_service.toggle_featured(db_session, provider.id).is_featured is False


def test_listing_filters_on_approved_status_and_references(db_session, seed, make_user, create):
    match = create(make_user("a"))
    other_neighborhood = create(make_user("b"), neighborhood_id=seed["other_neighborhood_id"])
    other_category = create(make_user("c"), category_id=seed["other_category_id"])
    pending = create(make_user("d"))
    for provider in (match, other_neighborhood, other_category):
        provider_service.approve_provider(db_session, provider.id)

    by_category = provider_service.get_approved_providers(db_session, category_id=seed["category_id"])
    assert {p.id for p in by_category} == {match.id, other_neighborhood.id}
    assert pending.id not in {p.id for p in by_category}

    both = provider_service.get_approved_providers(
        db_session, category_id=seed["category_id"], neighborhood_id=seed["neighborhood_id"]
    )
    assert [p.id for p in both] == [match.id]

    assert len(provider_service.get_approved_providers(db_session)) == 3
    assert [p.id for p in provider_service.get_pending_providers(db_session)] == [pending.id]


def test_inactive_approved_provider_is_still_listed(db_session, make_user, create):
    owner = make_user("a")
    provider = create(owner)
    provider_service.approve_provider(db_session, provider.id)
    provider_service.toggle_active(db_session, owner.id)

    listed = provider_service.get_approved_providers(db_session)
    assert [p.id for p in listed] == [provider.id]
    assert listed[0].is_active is False


def test_featured_requires_approval(db_session, make_user, create):
    approved = create(make_user("a"))
    pending = create(make_user("b"))
    provider_service.approve_provider(db_session, approved.id)
    provider_service.toggle_featured(db_session, approved.id)
    provider_service.toggle_featured(db_session, pending.id)

    assert [p.id for p in provider_service.get_featured_providers(db_session)] == [approved.id]


def test_reads_degrade_without_storage():
    assert provider_service.get_approved_providers(None) == []
    assert provider_service.get_featured_providers(None) == []
    assert provider_service.get_owned_provider(None, 1) is None
