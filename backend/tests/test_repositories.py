"""Tests for the SQLAlchemy repositories against an in-memory database."""
import uuid
from datetime import datetime, timezone

import pytest

from animestream.crud.advertisement import AdvertisementRepository
from animestream.crud.anime import AnimeRepository
from animestream.crud.user_role import UserRoleRepository, grant_role, has_role, revoke_role
from animestream.errors import StoreError
from animestream.models import ADMIN_ROLE, Advertisement, Anime


def _anime_values(**overrides):
    values = {
        "title": "Vinland Saga",
        "description": "Vikings.",
        "image_url": "https://img.example/vinland.jpg",
        "video_url": "https://video.example/embed/vinland",
        "rating": 8.8,
        "genre": "Historical",
        "release_year": 2019,
        "episodes": 24,
    }
    values.update(overrides)
    return values


class TestAnimeRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self, session):
        repository = AnimeRepository(session)

        anime = await repository.create(_anime_values())

        assert isinstance(anime.id, uuid.UUID)
        assert anime.created_at is not None
        assert anime.rating == pytest.approx(8.8)

    @pytest.mark.asyncio
    async def test_list_by_rating_is_descending(self, session):
        repository = AnimeRepository(session)
        for title, rating in [("B", 7.0), ("A", 9.1), ("C", 8.0)]:
            await repository.create(_anime_values(title=title, rating=rating))

        result = await repository.list_by_rating()

        assert [item.title for item in result] == ["A", "C", "B"]

    @pytest.mark.asyncio
    async def test_list_recent_is_newest_first(self, session):
        session.add_all(
            [
                Anime(**_anime_values(title="Old"), created_at=datetime(2020, 1, 1, tzinfo=timezone.utc)),
                Anime(**_anime_values(title="New"), created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
            ]
        )
        await session.commit()

        result = await AnimeRepository(session).list_recent()

        assert [item.title for item in result] == ["New", "Old"]

    @pytest.mark.asyncio
    async def test_get_with_malformed_id_returns_none(self, session):
        assert await AnimeRepository(session).get("not-a-uuid") is None

    @pytest.mark.asyncio
    async def test_update_changes_only_editable_fields(self, session):
        repository = AnimeRepository(session)
        anime = await repository.create(_anime_values())
        original_id = anime.id

        updated = await repository.update(str(anime.id), {"title": "Renamed", "id": uuid.uuid4()})

        assert updated.id == original_id
        assert updated.title == "Renamed"

    @pytest.mark.asyncio
    async def test_update_missing_row_returns_none(self, session):
        assert await AnimeRepository(session).update(str(uuid.uuid4()), {"title": "x"}) is None

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_matched(self, session):
        repository = AnimeRepository(session)
        anime = await repository.create(_anime_values())

        assert await repository.delete(str(anime.id)) is True
        assert await repository.delete(str(anime.id)) is False
        assert await repository.get(str(anime.id)) is None

    @pytest.mark.asyncio
    async def test_rating_constraint_surfaces_as_store_error(self, session):
        repository = AnimeRepository(session)

        with pytest.raises(StoreError) as exc_info:
            await repository.create(_anime_values(rating=11))

        assert exc_info.value.details == {"operation": "insert anime"}
        assert await repository.list_recent() == []


class TestAdvertisementRepository:
    @pytest.mark.asyncio
    async def test_new_advertisement_is_active_by_default(self, session):
        advertisement = await AdvertisementRepository(session).create(
            {"title": "Promo", "video_url": "https://v.example/a", "link_url": "https://l.example"}
        )

        assert advertisement.is_active is True

    @pytest.mark.asyncio
    async def test_first_active_ignores_inactive_rows(self, session):
        session.add(Advertisement(title="Off", video_url="v", link_url="l", is_active=False))
        await session.commit()
        repository = AdvertisementRepository(session)

        assert await repository.first_active() is None

        await repository.create({"title": "On", "video_url": "v", "link_url": "l", "is_active": True})
        active = await repository.first_active()

        assert active.title == "On"

    @pytest.mark.asyncio
    async def test_toggle_round_trip(self, session):
        repository = AdvertisementRepository(session)
        advertisement = await repository.create({"title": "Promo", "video_url": "v", "link_url": "l"})

        updated = await repository.update(str(advertisement.id), {"is_active": False})

        assert updated.is_active is False
        assert await repository.first_active() is None


class TestUserRoles:
    @pytest.mark.asyncio
    async def test_has_role_only_for_granted_users(self, session):
        await grant_role(session, "user-1", ADMIN_ROLE)
        repository = UserRoleRepository(session)

        assert await repository.has_role("user-1", ADMIN_ROLE) is True
        assert await repository.has_role("user-2", ADMIN_ROLE) is False
        assert await repository.has_role("user-1", "editor") is False

    @pytest.mark.asyncio
    async def test_grant_is_idempotent(self, session):
        assert await grant_role(session, "user-1", ADMIN_ROLE) is True
        assert await grant_role(session, "user-1", ADMIN_ROLE) is False

    @pytest.mark.asyncio
    async def test_revoke(self, session):
        await grant_role(session, "user-1", ADMIN_ROLE)

        assert await revoke_role(session, "user-1", ADMIN_ROLE) is True
        assert await has_role(session, "user-1", ADMIN_ROLE) is False
        assert await revoke_role(session, "user-1", ADMIN_ROLE) is False
