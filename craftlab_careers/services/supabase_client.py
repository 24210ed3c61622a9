"""Hosted backend adapter: PostgREST (Supabase) over httpx, implementing DataAccess."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from craftlab_careers.config import HTTP_TIMEOUT_SECONDS, SUPABASE_ANON_KEY, SUPABASE_URL
from craftlab_careers.schemas.application import Application, ApplicationRequest, ApplicationStatus, Message
from craftlab_careers.schemas.opportunity import Opportunity, OpportunityFilters
from craftlab_careers.schemas.profile import CandidateProfile
from craftlab_careers.services.data_access import (
    DataAccess,
    DataAccessError,
    MessageCallback,
    Unsubscribe,
    opportunity_from_row,
    profile_from_row,
)
from craftlab_careers.utils.logger import get_logger

logger = get_logger(__name__)

REST_PATH = "/rest/v1"


class SupabaseDataAccess(DataAccess):
    """
    Reads and writes the `profiles`, `opportunities`, `applications` and `messages` tables.
    Realtime sockets are not used: message subscriptions are served by poll_messages().
    """

    def __init__(
        self,
        url: str = SUPABASE_URL,
        api_key: str = SUPABASE_ANON_KEY,
        client: Optional[httpx.Client] = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        if not url or not api_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")
        self._base_url = url.rstrip("/") + REST_PATH
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.Client(timeout=timeout)
        self._subscribers: Dict[str, List[MessageCallback]] = defaultdict(list)
        self._cursors: Dict[str, str] = {}

    def close(self) -> None:
        self._client.close()

    def _get_rows(self, table: str, params: Dict[str, str]) -> Optional[List[Dict[str, Any]]]:
        """GET rows from a table. Returns None on any HTTP failure (already logged)."""
        try:
            response = self._client.get(f"{self._base_url}/{table}", params=params, headers=self._headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Backend HTTP error on %s: %s %s", table, e.response.status_code, e.response.text)
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Backend request on %s failed: %s", table, e)
            return None
        if not isinstance(data, list):
            logger.error("Unexpected payload from %s: %s", table, type(data).__name__)
            return None
        return data

    def fetch_profile(self, user_id: str) -> Optional[CandidateProfile]:
        rows = self._get_rows("profiles", {"id": f"eq.{user_id}", "select": "*"})
        if not rows:
            logger.info("Profile %s not found", user_id)
            return None
        try:
            return profile_from_row(rows[0])
        except ValidationError as e:
            logger.error("Invalid profile row for %s: %s", user_id, e)
            return None

    def fetch_opportunities(self, filters: Optional[OpportunityFilters] = None) -> List[Opportunity]:
        params = {"select": "*", "order": "created_at.desc"}
        if filters is not None:
            if filters.type:
                params["type"] = f"eq.{filters.type}"
            if filters.location:
                params["location"] = f"ilike.*{filters.location}*"
            if filters.industry:
                params["industry"] = f"eq.{filters.industry}"

        rows = self._get_rows("opportunities", params) or []
        opportunities: List[Opportunity] = []
        for row in rows:
            try:
                opportunities.append(opportunity_from_row(row))
            except ValidationError as e:
                logger.warning("Skipping invalid opportunity row %s: %s", row.get("id"), e)
        logger.info("Fetched %s opportunities", len(opportunities))
        return opportunities

    def insert_application(self, request: ApplicationRequest) -> Application:
        payload = {
            "user_id": request.user_id,
            "opportunity_id": request.opportunity_id,
            "cover_letter": request.cover_letter,
            "additional_info": request.additional_info,
            "status": ApplicationStatus.PENDING.value,
        }
        headers = {**self._headers, "Prefer": "return=representation"}
        try:
            response = self._client.post(f"{self._base_url}/applications", json=payload, headers=headers)
            response.raise_for_status()
            rows = response.json()
        except httpx.HTTPStatusError as e:
            raise DataAccessError(
                f"Application insert rejected: {e.response.status_code} {e.response.text}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise DataAccessError(f"Application insert failed: {e}") from e

        row = rows[0] if isinstance(rows, list) and rows else rows
        if not isinstance(row, dict):
            raise DataAccessError("Application insert returned no row")
        try:
            return Application(
                id=str(row["id"]),
                user_id=row.get("user_id", request.user_id),
                opportunity_id=row.get("opportunity_id", request.opportunity_id),
                status=row.get("status") or ApplicationStatus.PENDING,
                applied_date=row.get("applied_date"),
            )
        except (KeyError, ValidationError) as e:
            raise DataAccessError(f"Application insert returned an invalid row: {e}") from e

    def subscribe_to_messages(
        self,
        user_id: str,
        callback: MessageCallback,
        since: Optional[str] = None,
    ) -> Unsubscribe:
        """Register callback; only messages created after `since` (default: now) are delivered."""
        self._subscribers[user_id].append(callback)
        if since is not None:
            self._cursors[user_id] = since
        else:
            self._cursors.setdefault(user_id, datetime.now(timezone.utc).isoformat())

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(user_id, [])
            if callback in callbacks:
                callbacks.remove(callback)
            if not callbacks:
                self._subscribers.pop(user_id, None)
                self._cursors.pop(user_id, None)

        return unsubscribe

    def poll_messages(self) -> int:
        """
        Fetch messages newer than each subscriber's cursor and dispatch them oldest first.
        Returns the number of messages delivered. A failed fetch leaves the cursor unchanged.
        """
        delivered = 0
        for user_id in list(self._subscribers):
            if user_id not in self._subscribers:
                continue
            params = {
                "select": "*",
                "receiver_id": f"eq.{user_id}",
                "created_at": f"gt.{self._cursors[user_id]}",
                "order": "created_at.asc",
            }
            rows = self._get_rows("messages", params)
            if not rows:
                continue
            for row in rows:
                try:
                    message = Message.model_validate(row)
                except ValidationError as e:
                    logger.warning("Skipping invalid message row %s: %s", row.get("id"), e)
                    continue
                for cb in list(self._subscribers.get(user_id, [])):
                    cb(message)
                delivered += 1
                # a callback may have dropped the last subscription
                if user_id not in self._subscribers:
                    break
                self._cursors[user_id] = message.created_at
        if delivered:
            logger.info("Delivered %s new message(s)", delivered)
        return delivered
