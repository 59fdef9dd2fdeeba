from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
import sys

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.core.config import get_settings
from app.db.session import session_scope
from app.repositories import (
    AdminRepository,
    EventRepository,
    FeedbackRepository,
    RegistrationRepository,
    VolunteerRepository,
)


DEMO_DOMAIN = "demo.volunteers.example"

VOLUNTEER_TEMPLATES = [
    ("Alice Moreau", "+1 555 0100", ["first aid", "logistics"]),
    ("Bongani Dlamini", "+1 555 0101", ["cooking"]),
    ("Chen Wei", "+1 555 0102", ["translation", "photography"]),
    ("Dara Okafor", "+1 555 0103", []),
]

EVENT_TEMPLATES = [
    ("Park clean-up", "Litter picking along the river path.", "Riverside park"),
    ("Food bank shift", "Sorting and packing donations.", "Community hall"),
]


def main() -> None:
    settings = get_settings()
    now = datetime.now(UTC)

    with session_scope() as db:
        admin = AdminRepository(db).find_by_email(settings.bootstrap_admin_email)
        if not admin:
            raise RuntimeError("Admin not found. Run seed_admin first.")

        volunteers_repo = VolunteerRepository(db)
        volunteers = []
        for name, contact, skills in VOLUNTEER_TEMPLATES:
            email = f"{name.split()[0].lower()}@{DEMO_DOMAIN}"
            volunteer = volunteers_repo.find_by_email(email)
            if volunteer is None:
                volunteer = volunteers_repo.create(name=name, email=email, contact=contact, skills=skills)
            volunteers.append(volunteer)

        events_repo = EventRepository(db)
        registrations_repo = RegistrationRepository(db)
        feedbacks_repo = FeedbackRepository(db)
        for index, (title, description, location) in enumerate(EVENT_TEMPLATES):
            event = events_repo.create(
                admin_id=admin.id,
                title=title,
                description=description,
                date_time=now + timedelta(days=index + 1, hours=9),
                location=location,
                organizer_id=admin.id,
            )
            for volunteer in volunteers[index::2]:
                registrations_repo.create(event_id=event.id, volunteer_id=volunteer.id, status="Registered")
                feedbacks_repo.create(
                    volunteer_id=volunteer.id,
                    event_id=event.id,
                    feedback=f"Looking forward to the {title.lower()}.",
                    rating=5,
                )

    print(
        f"Demo data seeded: {len(volunteers)} volunteers, {len(EVENT_TEMPLATES)} events, "
        "registrations and feedback."
    )


if __name__ == "__main__":
    main()
