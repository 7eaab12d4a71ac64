from __future__ import annotations

from pydantic import JsonValue


# Any JSON value the caller posts. The store never checks its shape.
Event = JsonValue

EVENT_CREATED = "Event Created!"
