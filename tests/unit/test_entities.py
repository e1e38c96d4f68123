"""Unit tests for the Pydantic entity models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest
from pydantic import ValidationError

from content_sdk.models.entities import (
    Event,
    EventPlan,
    EventState,
    Image,
    Picture,
    PictureSet,
    SubEventDetails,
)
from tests.payloads import (
    TIME_CREATED_MS,
    TIME_UPDATED_MS,
    event_payload,
    image_payload,
    picture_payload,
    picture_set_payload,
    sub_event_payload,
)


# ======================================================================
# Image / Picture / PictureSet
# ======================================================================


class TestImage:
    def test_create_from_wire(self) -> None:
        image = Image.model_validate(image_payload())
        assert image.uri == "https://images.example.com/main.jpg"
        assert image.width == 1600
        assert image.height == 900

    def test_insecure_uri_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Image.model_validate({**image_payload(), "uri": "http://images.example.com/a.jpg"})

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_dimensions_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Image.model_validate({**image_payload(), field: 0})

    def test_frozen(self) -> None:
        image = Image.model_validate(image_payload())
        with pytest.raises(ValidationError):
            image.width = 10  # type: ignore[misc]


class TestPicture:
    def test_dimension_constants(self) -> None:
        assert (Picture.MAIN_WIDTH, Picture.MAIN_HEIGHT) == (1600, 900)
        assert (Picture.THUMBNAIL_WIDTH, Picture.THUMBNAIL_HEIGHT) == (300, 170)
        assert Picture.FORMAT == "jpg"

    def test_camel_case_wire_names(self) -> None:
        picture = Picture.model_validate(picture_payload(1))
        assert picture.thumbnail_image.width == 300
        dumped = picture.model_dump(mode="json", by_alias=True)
        assert set(dumped) == {"position", "mainImage", "thumbnailImage"}

    def test_position_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Picture.model_validate(picture_payload(0))


class TestPictureSet:
    def test_sequential_positions_validate(self) -> None:
        picture_set = PictureSet.model_validate(picture_set_payload(1, 2, 3))
        assert [p.position for p in picture_set.pictures] == [1, 2, 3]

    @pytest.mark.parametrize("positions", [(1, 3, 2), (2, 3, 4)])
    def test_bad_order_rejected_not_repaired(self, positions: tuple[int, ...]) -> None:
        with pytest.raises(ValidationError, match="position"):
            PictureSet.model_validate(picture_set_payload(*positions))

    def test_twenty_six_pictures_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at most 25"):
            PictureSet.model_validate(picture_set_payload(*range(1, 27)))

    def test_max_constant(self) -> None:
        assert PictureSet.MAX_NUMBER_OF_PICTURES == 25


# ======================================================================
# SubEventDetails
# ======================================================================


class TestSubEventDetails:
    def test_create_from_wire(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload())
        assert details.have_event is True
        assert details.coordinates == (44.4268, 26.1025)
        assert details.date_and_time == datetime(2017, 7, 14, 2, 40, tzinfo=timezone.utc)
        assert details.display.icon == "rings"

    def test_short_address_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SubEventDetails.model_validate({**sub_event_payload(), "address": "ab"})

    def test_coordinates_need_two_numbers(self) -> None:
        with pytest.raises(ValidationError):
            SubEventDetails.model_validate({**sub_event_payload(), "coordinates": [1.0]})

    def test_looks_active(self) -> None:
        assert SubEventDetails.model_validate(sub_event_payload()).looks_active is True

    def test_empty_title_map_not_active(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload(title={}))
        assert details.looks_active is False

    def test_empty_language_entry_not_active(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload(title={"en": "Party", "ro": ""}))
        assert details.looks_active is False

    def test_empty_slug_not_active(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload(slug=""))
        assert details.looks_active is False

    def test_ignores_have_event(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload(have_event=False))
        assert details.looks_active is True

    def test_timestamp_round_trips_as_milliseconds(self) -> None:
        details = SubEventDetails.model_validate(sub_event_payload())
        assert details.model_dump(mode="json", by_alias=True)["dateAndTime"] == TIME_CREATED_MS


# ======================================================================
# Event
# ======================================================================


def _event(**overrides: Any) -> Event:
    return Event.model_validate(event_payload(**overrides))


class TestEvent:
    def test_create_from_wire(self, event: Event) -> None:
        assert event.id == 42
        assert event.state is EventState.ACTIVE
        assert event.sub_domain == "ana-and-mihai"
        assert event.ui_state.show_setup_wizard is True
        assert event.time_last_updated == datetime(2017, 7, 14, 2, 41, 40, tzinfo=timezone.utc)

    def test_plan_persisted_hyphenated(self, event: Event) -> None:
        assert event.plan is EventPlan.QUICK_STARTER
        assert event.model_dump(mode="json", by_alias=True)["plan"] == "quick-starter"

    def test_wire_dump_matches_payload(self, event: Event, event_data: dict[str, Any]) -> None:
        assert event.model_dump(mode="json", by_alias=True)["timeLastUpdated"] == TIME_UPDATED_MS
        assert event.model_dump(mode="json", by_alias=True)["subDomain"] == event_data["subDomain"]

    def test_snake_case_names_accepted(self, event: Event) -> None:
        rebuilt = Event(**event.model_dump())
        assert rebuilt == event

    def test_title_is_trimmed(self) -> None:
        assert _event(title="   Ana and Mihai   ").title == "Ana and Mihai"

    @pytest.mark.parametrize("title", ["abc", "x" * 129])
    def test_title_bounds(self, title: str) -> None:
        with pytest.raises(ValidationError):
            _event(title=title)

    def test_bad_subdomain_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _event(subDomain="Ana_And_Mihai")

    def test_unknown_state_rejected(self) -> None:
        with pytest.raises(ValidationError, match="UNKNOWN"):
            _event(state=0)

    @pytest.mark.parametrize("state", [1, 2, 3])
    def test_known_states_accepted(self, state: int) -> None:
        assert _event(state=state).state == state

    def test_id_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            _event(id=0)

    def test_bad_picture_order_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _event(pictureSet=picture_set_payload(2, 1))


class TestEventDoesLookActive:
    def test_active(self, event: Event) -> None:
        assert event.does_look_active is True

    def test_no_pictures(self) -> None:
        event = _event(pictureSet=picture_set_payload())
        assert event.does_look_active is False

    def test_no_pictures_even_with_complete_sub_events(self) -> None:
        event = _event(
            pictureSet=picture_set_payload(),
            subEventDetails=[sub_event_payload(), sub_event_payload(slug="party")],
        )
        assert event.does_look_active is False

    def test_all_sub_events_skipped(self) -> None:
        event = _event(subEventDetails=[sub_event_payload(have_event=False)])
        assert event.does_look_active is False

    def test_no_sub_events(self) -> None:
        assert _event(subEventDetails=[]).does_look_active is False

    def test_held_sub_event_with_empty_title_map(self) -> None:
        event = _event(
            subEventDetails=[sub_event_payload(), sub_event_payload(title={}, slug="party")],
        )
        assert event.does_look_active is False

    def test_held_sub_event_with_empty_slug(self) -> None:
        event = _event(subEventDetails=[sub_event_payload(slug="")])
        assert event.does_look_active is False

    def test_skipped_sub_events_are_not_inspected(self) -> None:
        event = _event(
            subEventDetails=[sub_event_payload(), sub_event_payload(have_event=False, title={})],
        )
        assert event.does_look_active is True

    def test_recomputed_after_copy(self, event: Event) -> None:
        emptied = event.model_copy(update={"picture_set": PictureSet(pictures=[])})
        assert event.does_look_active is True
        assert emptied.does_look_active is False
