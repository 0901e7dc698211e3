"""
Seed data for the work-day event.

The application seeds on startup; this module can also be run directly to
create the data files ahead of time.

Usage:
    cd /path/to/project
    python -m app.db.seed
"""

from typing import Any, Dict

from .models import Event, Task
from .store import JsonStore, get_store


def build_default_event() -> Dict[str, Any]:
    """Return the event written on first boot."""
    event = Event(
        id="spring-cleanup-2024",
        name="Spring Cleanup & Maintenance",
        date="2024-04-15",
        time="9:00 AM - 4:00 PM",
        description=(
            "Join us for our spring work day! Help maintain our beautiful club facilities "
            "with landscaping, cleaning, and general maintenance tasks."
        ),
        organizerEmail="organizer@club.com",
        tasks=[
            Task(id="landscaping", name="Landscaping & Grounds", needed=6),
            Task(id="maintenance", name="General Maintenance", needed=4),
            Task(id="cleaning", name="Clubhouse Cleaning", needed=3),
            Task(id="painting", name="Touch-up Painting", needed=2),
        ],
    )
    return event.model_dump()


def initialize_database(store: JsonStore) -> None:
    """Seed the store with the default event and an empty ledger if absent."""
    store.initialize(build_default_event())


if __name__ == "__main__":
    store = get_store()
    initialize_database(store)
    print(f"✅ Data files ready in {store.data_dir}")
