"""
Tests for the admin anime and advertisement panels.

Every successful mutation must be followed by a full refetch of the list;
failed or unconfirmed operations must leave the store untouched.
"""
from datetime import date

import pytest

from animestream.views.managers import AdvertisementManager, AnimeManager
from animestream.views.notifications import Variant

from fakes import FakeAdvertisementPort, FakeAnimePort, make_advertisement, make_anime

VALID_ANIME = {
    "title": "Mob Psycho 100",
    "description": "Psychic middle schooler.",
    "image_url": "https://img.example/mob.jpg",
    "video_url": "https://video.example/embed/mob",
    "rating": "8.6",
    "genre": "Action",
    "release_year": "2016",
    "episodes": "12",
}


class TestAnimeManagerList:
    @pytest.mark.asyncio
    async def test_refresh_lists_newest_first(self):
        older = make_anime(title="Older")
        newer = make_anime(title="Newer")
        manager = AnimeManager(FakeAnimePort([older, newer]))

        assert await manager.refresh() is True

        assert [item.title for item in manager.items] == ["Newer", "Older"]

    @pytest.mark.asyncio
    async def test_refresh_failure_posts_error(self):
        manager = AnimeManager(FakeAnimePort([make_anime()], failing={"list_recent"}))

        assert await manager.refresh() is False

        assert manager.items == []
        assert manager.notifier.items[0].variant is Variant.DESTRUCTIVE


class TestAnimeManagerSubmit:
    @pytest.mark.asyncio
    async def test_create_refetches_and_closes_form(self):
        port = FakeAnimePort()
        manager = AnimeManager(port)
        await manager.refresh()

        manager.open_create()
        manager.update_form(VALID_ANIME)
        assert await manager.submit() is True

        assert port.calls == ["list_recent", "create", "list_recent"]
        assert [item.title for item in manager.items] == ["Mob Psycho 100"]
        assert manager.items[0].rating == pytest.approx(8.6)
        assert manager.items[0].episodes == 12
        assert manager.is_form_open is False
        assert manager.notifier.items[-1].description == "Anime added"

    @pytest.mark.asyncio
    async def test_boundary_values_are_accepted_and_listed_first(self):
        port = FakeAnimePort([make_anime(title="Existing")])
        manager = AnimeManager(port)

        manager.open_create()
        manager.update_form(
            {**VALID_ANIME, "rating": "10", "episodes": "0", "release_year": str(date.today().year)}
        )
        assert await manager.submit() is True

        assert manager.items[0].title == "Mob Psycho 100"
        assert manager.items[0].rating == 10.0
        assert manager.items[0].episodes == 0

    @pytest.mark.asyncio
    async def test_invalid_form_never_reaches_store(self):
        port = FakeAnimePort()
        manager = AnimeManager(port)

        manager.open_create()
        manager.update_form({**VALID_ANIME, "rating": "11"})
        assert await manager.submit() is False

        assert port.calls == []
        assert manager.is_form_open is True
        assert manager.form.errors == {"rating": "Rating must be between 0 and 10"}

    @pytest.mark.asyncio
    async def test_store_failure_keeps_form_open(self):
        port = FakeAnimePort(failing={"create"})
        manager = AnimeManager(port)

        manager.open_create()
        manager.update_form(VALID_ANIME)
        assert await manager.submit() is False

        assert port.calls == ["create"]
        assert manager.is_form_open is True
        assert manager.notifier.items[-1].description == "Failed to add anime"

    @pytest.mark.asyncio
    async def test_edit_updates_existing_row(self):
        row = make_anime(title="Old title")
        port = FakeAnimePort([row])
        manager = AnimeManager(port)
        await manager.refresh()

        form = manager.open_edit(row)
        assert form.values["title"] == "Old title"
        manager.update_form({"title": "New title"})
        assert await manager.submit() is True

        assert port.calls == ["list_recent", "update", "list_recent"]
        assert manager.items[0].title == "New title"
        assert manager.notifier.items[-1].description == "Anime updated"

    @pytest.mark.asyncio
    async def test_edit_of_vanished_row_fails(self):
        row = make_anime()
        port = FakeAnimePort([row])
        manager = AnimeManager(port)
        manager.open_edit(row)
        port.rows.clear()

        assert await manager.submit() is False

        assert manager.notifier.items[-1].description == "Failed to update anime"
        assert "list_recent" not in port.calls

    def test_cancel_discards_form(self):
        manager = AnimeManager(FakeAnimePort())
        manager.open_edit(make_anime())

        manager.cancel()

        assert manager.form is None
        assert manager.editing_id is None

    @pytest.mark.asyncio
    async def test_submit_without_form_does_nothing(self):
        port = FakeAnimePort()

        assert await AnimeManager(port).submit() is False
        assert port.calls == []


class TestAnimeManagerDelete:
    @pytest.mark.asyncio
    async def test_unconfirmed_delete_is_a_no_op(self):
        row = make_anime()
        port = FakeAnimePort([row])
        manager = AnimeManager(port)

        assert await manager.delete(str(row.id), confirmed=False) is False

        assert port.calls == []
        assert port.rows == [row]

    @pytest.mark.asyncio
    async def test_confirmed_delete_refetches(self):
        row = make_anime()
        port = FakeAnimePort([row, make_anime(title="Keep")])
        manager = AnimeManager(port)

        assert await manager.delete(str(row.id), confirmed=True) is True

        assert port.calls == ["delete", "list_recent"]
        assert [item.title for item in manager.items] == ["Keep"]
        assert manager.notifier.items[-1].description == "Anime deleted"

    @pytest.mark.asyncio
    async def test_delete_failure_posts_error(self):
        row = make_anime()
        manager = AnimeManager(FakeAnimePort([row], failing={"delete"}))

        assert await manager.delete(str(row.id), confirmed=True) is False

        assert manager.notifier.items[-1].description == "Failed to delete anime"

    def test_delete_prompt(self):
        assert AnimeManager(FakeAnimePort()).delete_prompt == "Are you sure you want to delete this anime?"


class TestAdvertisementManager:
    @pytest.mark.asyncio
    async def test_create_defaults_to_active(self):
        port = FakeAdvertisementPort()
        manager = AdvertisementManager(port)

        manager.open_create()
        manager.update_form({"title": "Promo", "video_url": "https://v.example/a", "link_url": "https://l.example"})
        assert await manager.submit() is True

        assert manager.items[0].is_active is True
        assert manager.notifier.items[-1].description == "Advertisement added"

    @pytest.mark.asyncio
    async def test_toggle_flips_listed_value_and_refetches(self):
        ad = make_advertisement(is_active=True)
        port = FakeAdvertisementPort([ad])
        manager = AdvertisementManager(port)
        await manager.refresh()

        assert await manager.toggle_active(str(ad.id)) is True

        assert ad.is_active is False
        assert port.calls == ["list_recent", "update", "list_recent"]
        assert manager.notifier.items == []

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_value(self):
        ad = make_advertisement(is_active=False)
        manager = AdvertisementManager(FakeAdvertisementPort([ad]))
        await manager.refresh()

        await manager.toggle_active(str(ad.id))
        await manager.toggle_active(str(ad.id))

        assert ad.is_active is False

    @pytest.mark.asyncio
    async def test_toggle_failure_posts_error(self):
        ad = make_advertisement()
        manager = AdvertisementManager(FakeAdvertisementPort([ad], failing={"update"}))
        await manager.refresh()

        assert await manager.toggle_active(str(ad.id)) is False

        assert ad.is_active is True
        assert manager.notifier.items[-1].description == "Failed to update status"

    @pytest.mark.asyncio
    async def test_toggle_of_unlisted_row_fails(self):
        port = FakeAdvertisementPort()
        manager = AdvertisementManager(port)

        assert await manager.toggle_active("missing") is False
        assert port.calls == []
