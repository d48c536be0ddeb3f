# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Static client -> post -> locations catalog used by roster and staff forms.
"""

CLIENT_LOCATION_MAP: dict[str, dict[str, list[str]]] = {
    "SKA": {
        "OFFSHORE MEDIC": [
            "B11", "BARAM", "BARONIA", "BOKOR", "D35", "E11",
            "KANOWIT KAKG", "KASAWARI", "M1", "NC3", "TEMANA", "TUKAU",
        ],
        "ESCORT MEDIC": ["BINTULU", "MIRI"],
        "IM / OHN": ["SKA OFFICE", "BIF /BCOT"],
    },
    "SBA": {
        "OFFSHORE MEDIC": [
            "ERB WEST (EW)", "KINABALU (KNAG)", "SAMARANG (SM)", "SUMANDAK (SUPD)",
        ],
        "ESCORT MEDIC": ["KK", "LABUAN"],
        "IM / OHN": ["SBA OFFICE", "SOGT"],
    },
}

# Display order of clients in roster views; unknown clients sort last.
CLIENT_ORDER: dict[str, int] = {"SKA": 1, "SBA": 2}


def get_clients() -> list[str]:
    return sorted(CLIENT_LOCATION_MAP)


def get_posts_for_client(client: str) -> list[str]:
    return sorted(CLIENT_LOCATION_MAP.get(client, {}))


def get_locations_for_client_post(client: str, post: str) -> list[str]:
    return sorted(CLIENT_LOCATION_MAP.get(client, {}).get(post, []))


def get_all_posts() -> list[str]:
    return sorted({post for posts in CLIENT_LOCATION_MAP.values() for post in posts})


def get_all_locations() -> list[str]:
    return sorted(
        {
            loc
            for posts in CLIENT_LOCATION_MAP.values()
            for locations in posts.values()
            for loc in locations
        }
    )
