"""
Tests for the PostgREST adapter, using httpx.MockTransport (no network).
"""

import json
from typing import Callable, List

import httpx
import pytest

from craftlab_careers.schemas import ApplicationRequest, ApplicationStatus, OpportunityFilters
from craftlab_careers.services.data_access import DataAccessError
from craftlab_careers.services.supabase_client import SupabaseDataAccess

BASE_URL = "https://project.supabase.co"


def _backend(handler: Callable[[httpx.Request], httpx.Response]) -> SupabaseDataAccess:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SupabaseDataAccess(url=BASE_URL, api_key="anon-key", client=client)


class TestConstruction:

    def test_requires_credentials(self):
        with pytest.raises(ValueError):
            SupabaseDataAccess(url="", api_key="")


class TestReads:
    """Profile and opportunity reads."""

    def test_fetch_profile(self):
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{
                "id": "p1", "user_type": "intern", "location": "Nairobi",
                "skills": {"programming": ["Python"]},
            }])

        profile = _backend(handler).fetch_profile("p1")
        assert profile.user_type == "intern"
        assert profile.skills.programming == ["Python"]

        request = seen[0]
        assert request.url.path == "/rest/v1/profiles"
        assert request.url.params["id"] == "eq.p1"
        assert request.headers["apikey"] == "anon-key"
        assert request.headers["Authorization"] == "Bearer anon-key"

    def test_fetch_profile_not_found(self):
        backend = _backend(lambda request: httpx.Response(200, json=[]))
        assert backend.fetch_profile("ghost") is None

    def test_fetch_opportunities_with_filters(self):
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[
                {"id": "o1", "title": "Data Attachment", "type": "attachment", "work_type": "onsite",
                 "location": "Mombasa, Kenya", "requirements": {"skills": ["SQL"]}},
                {"id": "o2", "title": "Broken", "requirements": "not-an-object"},
            ])

        opportunities = _backend(handler).fetch_opportunities(
            OpportunityFilters(type="attachment", location="Mombasa")
        )
        assert [o.id for o in opportunities] == ["o1"]
        assert opportunities[0].requirements.skills == ["SQL"]

        params = seen[0].url.params
        assert params["order"] == "created_at.desc"
        assert params["type"] == "eq.attachment"
        assert params["location"] == "ilike.*Mombasa*"
        assert "industry" not in params

    def test_server_error_returns_empty(self):
        backend = _backend(lambda request: httpx.Response(500, text="boom"))
        assert backend.fetch_opportunities() == []
        assert backend.fetch_profile("p1") is None

    def test_connection_error_returns_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        assert _backend(handler).fetch_opportunities() == []


class TestApplications:
    """Application inserts."""

    def test_insert_application(self):
        seen: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            body = json.loads(request.content)
            return httpx.Response(201, json=[{**body, "id": "a1", "applied_date": "2025-01-02T08:00:00+00:00"}])

        app = _backend(handler).insert_application(
            ApplicationRequest(user_id="p1", opportunity_id="o1", cover_letter="Hello")
        )
        assert app.id == "a1"
        assert app.status == ApplicationStatus.PENDING
        assert app.applied_date == "2025-01-02T08:00:00+00:00"

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/rest/v1/applications"
        assert request.headers["Prefer"] == "return=representation"
        assert json.loads(request.content) == {
            "user_id": "p1",
            "opportunity_id": "o1",
            "cover_letter": "Hello",
            "additional_info": "",
            "status": "pending",
        }

    def test_insert_rejected(self):
        backend = _backend(lambda request: httpx.Response(409, json={"message": "duplicate"}))
        with pytest.raises(DataAccessError):
            backend.insert_application(ApplicationRequest(user_id="p1", opportunity_id="o1"))

    def test_insert_without_row(self):
        backend = _backend(lambda request: httpx.Response(201, json=[]))
        with pytest.raises(DataAccessError):
            backend.insert_application(ApplicationRequest(user_id="p1", opportunity_id="o1"))


class TestMessagePolling:
    """Polling-backed message subscriptions."""

    def test_poll_delivers_in_order_and_advances_cursor(self):
        start = "2025-01-01T00:00:00+00:00"
        rows = [
            {"id": "m1", "sender_id": "org", "receiver_id": "p1", "content": "Hi",
             "created_at": "2025-01-01T09:00:00+00:00"},
            {"id": "m2", "sender_id": "org", "receiver_id": "p1", "content": "Interview?",
             "created_at": "2025-01-01T09:05:00+00:00"},
        ]
        cursors: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["receiver_id"] == "eq.p1"
            assert request.url.params["order"] == "created_at.asc"
            cursor = request.url.params["created_at"]
            cursors.append(cursor)
            return httpx.Response(200, json=rows if cursor == f"gt.{start}" else [])

        backend = _backend(handler)
        received = []
        unsubscribe = backend.subscribe_to_messages("p1", received.append, since=start)

        assert backend.poll_messages() == 2
        assert [m.id for m in received] == ["m1", "m2"]

        assert backend.poll_messages() == 0
        assert cursors == [f"gt.{start}", "gt.2025-01-01T09:05:00+00:00"]

        unsubscribe()
        assert backend.poll_messages() == 0
        assert len(cursors) == 2

    def test_failed_poll_keeps_cursor(self):
        start = "2025-01-01T00:00:00+00:00"
        cursors: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            cursors.append(request.url.params["created_at"])
            return httpx.Response(503)

        backend = _backend(handler)
        backend.subscribe_to_messages("p1", lambda m: None, since=start)
        assert backend.poll_messages() == 0
        assert backend.poll_messages() == 0
        assert cursors == [f"gt.{start}", f"gt.{start}"]

    def test_unsubscribe_during_dispatch_stops_delivery(self):
        start = "2025-01-01T00:00:00+00:00"
        rows = [
            {"id": "m1", "sender_id": "org", "receiver_id": "p1", "content": "Hi",
             "created_at": "2025-01-01T09:00:00+00:00"},
            {"id": "m2", "sender_id": "org", "receiver_id": "p1", "content": "Again",
             "created_at": "2025-01-01T09:05:00+00:00"},
        ]
        cursors: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            cursors.append(request.url.params["created_at"])
            return httpx.Response(200, json=rows)

        backend = _backend(handler)
        received = []

        def on_message(message):
            received.append(message)
            unsubscribe()

        unsubscribe = backend.subscribe_to_messages("p1", on_message, since=start)

        assert backend.poll_messages() == 1
        assert [m.id for m in received] == ["m1"]
        assert backend._subscribers == {}
        assert backend._cursors == {}

        later = "2025-02-01T00:00:00+00:00"
        backend.subscribe_to_messages("p1", lambda m: None, since=later)
        backend.poll_messages()
        assert cursors == [f"gt.{start}", f"gt.{later}"]

    def test_explicit_since_resets_existing_cursor(self):
        cursors: List[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            cursors.append(request.url.params["created_at"])
            return httpx.Response(200, json=[])

        backend = _backend(handler)
        backend.subscribe_to_messages("p1", lambda m: None, since="2025-03-01T00:00:00+00:00")
        backend.subscribe_to_messages("p1", lambda m: None, since="2025-01-01T00:00:00+00:00")
        backend.poll_messages()
        assert cursors == ["gt.2025-01-01T00:00:00+00:00"]
