"""
Demo data bootstrap.

Populates an empty database with six launches (three upcoming, one live,
two completed), their key personnel, and a backdated event timeline for
the live launch. Running it against a non-empty launch table does nothing.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from launchwatch.core.clock import DAY_MS, HOUR_MS, MINUTE_MS, now_ms
from launchwatch.models.event import EventType, LaunchEvent
from launchwatch.models.launch import Launch, LaunchStatus
from launchwatch.models.personnel import Personnel

logger = logging.getLogger(__name__)

SPACEX_STREAM = "https://youtube.com/spacex"

# launch_offset / created_offset are relative to seed time (ms)
DEMO_LAUNCHES = [
    {
        "key": "starlink",
        "name": "Starlink Group 9-14",
        "rocket_name": "Falcon 9",
        "rocket_type": "Block 5",
        "launch_site": "SLC-40, Cape Canaveral",
        "launch_offset": 2 * DAY_MS + 4 * HOUR_MS,
        "status": LaunchStatus.UPCOMING,
        "description": "SpaceX Starlink mission deploying 23 satellites to expand global internet coverage. "
                       "This flight marks the 15th mission for this particular booster.",
        "payload_type": "Starlink Satellites",
        "payload_mass": 17400,
        "orbit_type": "LEO (Low Earth Orbit)",
    },
    {
        "key": "crs31",
        "name": "CRS-31",
        "rocket_name": "Falcon 9",
        "rocket_type": "Block 5",
        "launch_site": "LC-39A, Kennedy Space Center",
        "launch_offset": 5 * DAY_MS + 14 * HOUR_MS,
        "status": LaunchStatus.UPCOMING,
        "description": "31st Commercial Resupply Services mission to the International Space Station. "
                       "Cargo Dragon carrying science experiments, crew supplies, and equipment.",
        "payload_type": "Dragon Spacecraft",
        "payload_mass": 2500,
        "orbit_type": "ISS Orbit",
        "livestream_url": SPACEX_STREAM,
    },
    {
        "key": "starship7",
        "name": "Starship Flight 7",
        "rocket_name": "Starship",
        "rocket_type": "Full Stack",
        "launch_site": "Starbase, Boca Chica",
        "launch_offset": 14 * DAY_MS,
        "status": LaunchStatus.UPCOMING,
        "description": "Seventh integrated test flight of Starship and Super Heavy. Objectives include booster "
                       "catch attempt, extended Ship coast phase, and controlled ocean splashdown.",
        "payload_type": "Test Flight",
        "orbit_type": "Suborbital",
    },
    {
        "key": "transporter12",
        "name": "Transporter-12",
        "rocket_name": "Falcon 9",
        "rocket_type": "Block 5",
        "launch_site": "VSFB SLC-4E",
        "launch_offset": -20 * MINUTE_MS,
        "status": LaunchStatus.LIVE,
        "description": "Dedicated rideshare mission carrying multiple small satellites from various commercial "
                       "and government customers to sun-synchronous orbit.",
        "payload_type": "Multiple Satellites",
        "payload_mass": 6000,
        "orbit_type": "SSO (Sun-Synchronous)",
        "livestream_url": SPACEX_STREAM,
    },
    {
        "key": "crew9",
        "name": "Crew-9",
        "rocket_name": "Falcon 9",
        "rocket_type": "Block 5",
        "launch_site": "LC-39A, Kennedy Space Center",
        "launch_offset": -3 * DAY_MS,
        "created_offset": -4 * DAY_MS,
        "status": LaunchStatus.COMPLETED,
        "description": "NASA Commercial Crew mission carrying astronauts to the ISS for a six-month expedition. "
                       "Successful launch and docking achieved.",
        "payload_type": "Crew Dragon",
        "orbit_type": "ISS Orbit",
    },
    {
        "key": "bandwagon2",
        "name": "Bandwagon-2",
        "rocket_name": "Falcon 9",
        "rocket_type": "Block 5",
        "launch_site": "SLC-40, Cape Canaveral",
        "launch_offset": -7 * DAY_MS,
        "created_offset": -8 * DAY_MS,
        "status": LaunchStatus.COMPLETED,
        "description": "Second Bandwagon mission, a new rideshare service for mid-inclination orbits "
                       "not covered by standard Transporter flights.",
        "payload_type": "Multiple Satellites",
        "payload_mass": 4500,
        "orbit_type": "MEO",
    },
]

DEMO_PERSONNEL = [
    ("crs31", "Sarah Chen", "Mission Director", "15 years at SpaceX. Led over 50 successful missions.", False),
    ("crew9", "Nick Hague", "Commander", "NASA astronaut, veteran of Expedition 59/60.", True),
    ("crew9", "Aleksandr Gorbunov", "Mission Specialist", "Roscosmos cosmonaut on first spaceflight.", True),
    ("starship7", "Kate Tice", "Quality Engineering Manager", "Known for hosting Starship webcast coverage.", False),
]

# Live launch timeline: (offset before seed time, title, description, type)
LIVE_TIMELINE = [
    (20 * MINUTE_MS, "LIFTOFF", "Falcon 9 has lifted off from Vandenberg Space Force Base!", EventType.MILESTONE),
    (18 * MINUTE_MS, "Max-Q", "Vehicle has passed through maximum aerodynamic pressure.", EventType.MILESTONE),
    (17 * MINUTE_MS, "MECO", "Main engine cutoff confirmed. Stage separation successful.", EventType.MILESTONE),
    (15 * MINUTE_MS, "Second Stage Ignition", "Merlin Vacuum engine has ignited for orbital insertion.", EventType.MILESTONE),
    (12 * MINUTE_MS, "Booster Landing Confirmed", "First stage has landed on Of Course I Still Love You droneship.", EventType.SUCCESS),
    (5 * MINUTE_MS, "SECO-1", "Second engine cutoff. Coast phase initiated.", EventType.MILESTONE),
]
LIVE_LAUNCH_KEY = "transporter12"


def seed_demo_data(db: Session, now: Optional[int] = None) -> int:
    """
    Insert the demo data set if no launch exists yet.

    Returns the number of launches inserted (0 when already seeded).
    """
    if db.query(Launch.id).first() is not None:
        logger.info("Launches already present, skipping demo seed")
        return 0

    now = now if now is not None else now_ms()

    launches = {}
    for spec in DEMO_LAUNCHES:
        fields = {k: v for k, v in spec.items() if k not in ("key", "launch_offset", "created_offset")}
        launch = Launch(
            launch_date=now + spec["launch_offset"],
            created_at=now + spec.get("created_offset", 0),
            updated_at=now,
            **fields,
        )
        db.add(launch)
        launches[spec["key"]] = launch
    # Assign primary keys before wiring up children
    db.flush()

    for key, name, role, bio, is_astronaut in DEMO_PERSONNEL:
        db.add(Personnel(launch_id=launches[key].id, name=name, role=role, bio=bio, is_astronaut=is_astronaut))

    live_launch = launches[LIVE_LAUNCH_KEY]
    for offset, title, description, event_type in LIVE_TIMELINE:
        db.add(LaunchEvent(
            launch_id=live_launch.id,
            timestamp=now - offset,
            title=title,
            description=description,
            event_type=event_type,
            is_live=True,
        ))

    db.commit()
    logger.info(f"Seeded {len(launches)} launches, {len(DEMO_PERSONNEL)} personnel, {len(LIVE_TIMELINE)} events")
    return len(launches)
