#!/usr/bin/env python3
"""
Seed script to create demo reservations
"""

import asyncio
from datetime import datetime, timedelta, timezone

DEMO_CREATED_BY = "seed-demo"

DEMO_RESERVATIONS = [
    {
        "hour": 12,
        "duration": 60,
        "customer": {"name": "Alice Martin", "phone": "+1-555-123-4567", "email": "alice@example.com"},
        "partySize": 2,
        "category": "lunch",
        "status": "confirmed",
        "source": "phone",
        "tableIds": ["T1"],
    },
    {
        "hour": 19,
        "duration": 90,
        "customer": {"name": "Bruno Costa", "phone": "(555) 987-6543", "notes": "Nut allergy"},
        "partySize": 4,
        "category": "dinner",
        "source": "web",
        "tags": ["birthday"],
    },
    {
        "hour": 20,
        "duration": 150,
        "customer": {"name": "Chen Wei", "phone": "+44 20 7946 0958"},
        "partySize": 8,
        "category": "special",
        "status": "confirmed",
        "source": "email",
        "notes": "Tasting menu, private room",
        "tableIds": ["P1", "P2"],
    },
]


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from seatkit.database import Base, SessionLocal, engine
    from seatkit.models.reservation import Reservation, utcnow
    from seatkit.schemas.reservation import STATUS_TIMESTAMP_FIELDS, ReservationCreate, ReservationStatus
    from seatkit.services import reservation_service

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        # Check if demo reservations already exist
        result = await db.execute(
            select(Reservation).where(Reservation.created_by == DEMO_CREATED_BY).limit(1)
        )
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        tomorrow = (datetime.now(timezone.utc) + timedelta(days=1)).replace(
            minute=0, second=0, microsecond=0
        )

        created = []
        for entry in DEMO_RESERVATIONS:
            payload = {k: v for k, v in entry.items() if k != "hour"}
            payload["date"] = tomorrow.replace(hour=entry["hour"])
            payload["createdBy"] = DEMO_CREATED_BY

            data = ReservationCreate.model_validate(payload)
            row = await reservation_service.create_reservation(db, data)

            # Stamp the lifecycle time for reservations seeded past pending
            status = ReservationStatus(row.status)
            if status in STATUS_TIMESTAMP_FIELDS:
                setattr(row, STATUS_TIMESTAMP_FIELDS[status], utcnow())
            created.append(row)

        await db.commit()

    await engine.dispose()

    print(f"\nDemo data created successfully!\n\nReservations: {len(created)}")
    for row in created:
        print(f"  {row.date:%Y-%m-%d %H:%M} UTC  {row.customer['name']} ({row.party_size})  {row.status.value}")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
