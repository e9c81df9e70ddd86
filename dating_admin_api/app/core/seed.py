"""
Store construction and the fixed sample data loaded on start.

``build_store`` is the single place that decides what a fresh store
contains: always the configured administrator, and the demo users,
reports, verifications, transactions, events, messages, API keys and
API logs unless ``settings.seed_sample_data`` is off.  User and
transaction dates are fixed; messages, keys and logs are stamped with
the current date so the same-day counters have something to count.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from .config import Settings
from .security import hash_password
from .store import Clock, MemStore, generate_api_key


logger = logging.getLogger(__name__)


def _user(
    name: str,
    username: str,
    email: str,
    phone: str,
    dob: str,
    city: str,
    latitude: float,
    longitude: float,
    is_active: bool,
    is_verified: bool,
    bio: str,
    picture: int,
    interests: list,
    joined: str,
    **profile: object,
) -> dict:
    record = {
        "id": str(uuid.uuid4()),
        "name": name,
        "username": username,
        "email": email,
        "phone": phone,
        "dob": dob,
        "location": {
            "city": city,
            "country": "US",
            "coordinates": {"latitude": latitude, "longitude": longitude},
        },
        "is_active": is_active,
        "is_verified": is_verified,
        "bio": bio,
        "images": [f"https://picsum.photos/400/400?random={picture}"],
        "interests": interests,
        "date": None,
        "created_at": joined,
        "updated_at": joined,
    }
    record.update(profile)
    return record


def seed_admin(store: MemStore, settings: Settings) -> dict:
    """Create the configured administrator with a hashed password."""
    password_hash = settings.admin_password_hash or hash_password(settings.admin_password)
    admin = store.create_admin(
        {
            "name": settings.admin_name,
            "email": settings.admin_email,
            "password": password_hash,
            "active": True,
            "role": "admin",
        }
    )
    logger.info("Seeded administrator %s", admin["email"])
    return admin


def seed_sample_data(store: MemStore) -> None:
    """Load the demo dataset into ``store``."""
    now = store.now_iso()

    users = [
        _user(
            "Sarah Johnson", "sarah_j", "sarah@example.com", "+1-555-123-4567", "1995-06-15",
            "New York", 40.7128, -74.006, True, True,
            "Looking for genuine connections and someone who shares my love for adventure!",
            1, ["Photography", "Hiking", "Travel", "Coffee", "Art"], "2024-01-15",
            occupation="Marketing Manager", education="Bachelor's Degree", height="5'6\"",
            herefor="Long-term relationship", relationship="Single", children="Don't have kids",
            drinking="Socially", smoking="Never", language=["English", "Spanish"], religion="Christian",
        ),
        _user(
            "Mike Chen", "mike_chen", "mike@example.com", "+1-555-234-5678", "1990-03-22",
            "San Francisco", 37.7749, -122.4194, True, False,
            "Software engineer who loves outdoor activities and trying new restaurants.",
            2, ["Hiking", "Coding", "Movies", "Food", "Gaming"], "2024-01-14",
            occupation="Software Engineer", education="Master's Degree", height="5'10\"",
            herefor="Dating", relationship="Single", children="Want kids",
            drinking="Occasionally", smoking="Never", language=["English", "Mandarin"], religion="Agnostic",
        ),
        _user(
            "Emma Davis", "emma_d", "emma@example.com", "+1-555-345-6789", "1993-09-08",
            "Los Angeles", 34.0522, -118.2437, True, True,
            "Yoga instructor and wellness enthusiast. Looking for someone who values health and mindfulness.",
            3, ["Yoga", "Meditation", "Healthy Cooking", "Beach", "Music"], "2024-01-13",
            occupation="Yoga Instructor", education="Bachelor's Degree", height="5'4\"",
            herefor="Serious relationship", relationship="Single", children="Don't have kids",
            drinking="Rarely", smoking="Never", language=["English"], religion="Buddhist",
        ),
        _user(
            "David Wilson", "david_w", "david@example.com", "+1-555-456-7890", "1988-12-03",
            "Chicago", 41.8781, -87.6298, False, True,
            "Teacher who loves books, board games, and meaningful conversations.",
            4, ["Reading", "Teaching", "Board Games", "History", "Writing"], "2024-01-12",
            occupation="High School Teacher", education="Master's Degree", height="6'0\"",
            herefor="Long-term relationship", relationship="Single", children="Have kids",
            drinking="Socially", smoking="Never", language=["English", "French"], religion="Catholic",
        ),
        _user(
            "Jessica Martinez", "jess_m", "jessica@example.com", "+1-555-567-8901", "1996-04-18",
            "Miami", 25.7617, -80.1918, True, False,
            "Graphic designer who loves art, music festivals, and weekend adventures.",
            5, ["Design", "Art", "Music", "Festivals", "Dancing"], "2024-01-11",
            occupation="Graphic Designer", education="Bachelor's Degree", height="5'5\"",
            herefor="Casual dating", relationship="Single", children="Don't want kids",
            drinking="Regularly", smoking="Socially", language=["English", "Spanish"], religion="Non-religious",
        ),
    ]
    for user in users:
        store.users.insert(user)
    ids = [user["id"] for user in users]

    reports = [
        (ids[1], ids[0], "Inappropriate Content", "User posted inappropriate photos in their profile", "pending"),
        (ids[4], ids[2], "Harassment", "User sent multiple unwanted messages after being asked to stop", "pending"),
        (ids[3], ids[1], "Fake Profile", "Profile appears to be using fake photos and information", "resolved"),
    ]
    for violator_id, reporter_id, reason, description, status in reports:
        store.reports.insert(
            {
                "id": str(uuid.uuid4()),
                "violator_id": violator_id,
                "user_id": reporter_id,
                "reason": reason,
                "description": description,
                "status": status,
                "created_at": now,
                "updated_at": now,
            }
        )

    for number, user_id, status in ((1, ids[1], "pending"), (2, ids[4], "pending"), (3, ids[2], "approved")):
        store.verifications.insert(
            {
                "id": str(uuid.uuid4()),
                "video": f"https://example.com/verification{number}.mp4",
                "user_id": user_id,
                "status": status,
                "created_at": now,
                "updated_at": now,
            }
        )

    transactions = [
        ("TXN-001", "29.99", "Premium Monthly Subscription", "Premium Monthly", True, ids[0], "2024-01-15"),
        ("TXN-002", "99.99", "Premium Annual Subscription", "Premium Annual", True, ids[2], "2024-01-14"),
        ("TXN-003", "19.99", "Premium Plus Monthly", "Premium Plus", False, ids[3], "2024-01-13"),
        ("TXN-004", "29.99", "Premium Monthly Subscription", "Premium Monthly", True, ids[4], "2024-01-12"),
    ]
    for txn_id, amount, narration, plan, subscribed, user_id, day in transactions:
        store.transactions.insert(
            {
                "id": txn_id,
                "amount": amount,
                "reference_id": txn_id.replace("TXN", "REF"),
                "narration": narration,
                "plan": plan,
                "subscribed": subscribed,
                "user_id": user_id,
                "approved_by": "admin",
                "created_at": day,
                "updated_at": day,
            }
        )

    store.events.insert(
        {
            "id": str(uuid.uuid4()),
            "title": "Coffee Date",
            "description": "Let's grab coffee and get to know each other better",
            "start_time": datetime(2024, 1, 20, 15, 0, tzinfo=timezone.utc).isoformat(),
            "location": {
                "address": "Starbucks, 123 Main St, New York, NY",
                "coordinates": {"lat": 40.7589, "lng": -73.9851},
            },
            "creator_id": ids[0],
            "partner_id": ids[1],
            "status": "pending",
            "created_at": now,
            "updated_at": now,
        }
    )
    store.events.insert(
        {
            "id": str(uuid.uuid4()),
            "title": "Museum Visit",
            "description": "Explore the art museum together this weekend",
            "start_time": datetime(2024, 1, 21, 14, 0, tzinfo=timezone.utc).isoformat(),
            "location": {
                "address": "Metropolitan Museum, New York, NY",
                "coordinates": {"lat": 40.7794, "lng": -73.9632},
            },
            "creator_id": ids[2],
            "partner_id": None,
            "status": "planned",
            "created_at": now,
            "updated_at": now,
        }
    )

    store.create_message(
        {
            "channel": "ch-" + uuid.uuid4().hex[:8],
            "content": "Hey! I really enjoyed our conversation yesterday. "
            "Would you like to meet for coffee sometime this week?",
            "type": "text",
            "sender": ids[0],
            "recipient": ids[1],
            "read": False,
            "deleted": False,
            "flagged": False,
        }
    )
    store.create_message(
        {
            "channel": "ch-" + uuid.uuid4().hex[:8],
            "content": "Check out this photo from my weekend trip!",
            "type": "image",
            "sender": ids[2],
            "recipient": ids[4],
            "read": True,
            "deleted": False,
            "flagged": False,
        }
    )

    keys = []
    for name, email, active in (
        ("Mobile App Production", "dev@loveapp.com", True),
        ("Analytics Dashboard", "analytics@loveapp.com", True),
        ("Testing Environment", "test@loveapp.com", False),
    ):
        keys.append(store.create_api_key({"apikey": generate_api_key(), "name": name, "email": email, "active": active}))

    for key, url, method, ip, duration, location, caller in (
        (keys[0], "/api/users", "GET", "192.168.1.100", "143ms", "New York, US", "mobile_app"),
        (keys[0], "/api/matches", "POST", "10.0.0.45", "267ms", "London, UK", "mobile_app"),
        (keys[1], "/api/analytics", "GET", "172.16.0.12", "89ms", "Tokyo, JP", "analytics_dashboard"),
    ):
        store.create_api_log(
            {
                "apikey": key["apikey"],
                "url": url,
                "type": method,
                "ip": ip,
                "duration": duration,
                "location": location,
                "by": caller,
            }
        )
    logger.info(
        "Seeded %d users, %d reports, %d transactions, %d events",
        len(store.users),
        len(store.reports),
        len(store.transactions),
        len(store.events),
    )


def build_store(settings: Settings, clock: Optional[Clock] = None) -> MemStore:
    """Create a store for ``settings`` with the administrator and, optionally, sample data."""
    store = MemStore(clock=clock, tz=settings.stats_timezone)
    seed_admin(store, settings)
    if settings.seed_sample_data:
        seed_sample_data(store)
    return store
